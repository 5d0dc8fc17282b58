"""Shared pytest fixtures."""
import sys

import pytest

from postfix_calc.common.logger import configure_logging, logger


@pytest.fixture(autouse=True)
def log_to_captured_stderr(monkeypatch, capsys) -> None:
    """Point the project log handler at the stderr captured for the current test."""
    configure_logging()
    for handler in logger.handlers:
        monkeypatch.setattr(handler, "stream", sys.stderr)
