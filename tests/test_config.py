"""Test Settings and logger configuration."""
import logging

from pydantic import ValidationError
import pytest

from postfix_calc.common.config import Settings
from postfix_calc.common.logger import configure_logging, logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Remove any settings inherited from the environment."""
    monkeypatch.delenv("POSTFIX_CALC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("POSTFIX_CALC_ERROR_EXIT_CODE", raising=False)


def test_settings_defaults() -> None:
    """Defaults: warnings only, exit status 404."""
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.error_exit_code == 404


def test_settings_from_env(monkeypatch) -> None:
    """Values are read from POSTFIX_CALC_* variables."""
    monkeypatch.setenv("POSTFIX_CALC_LOG_LEVEL", "debug")
    monkeypatch.setenv("POSTFIX_CALC_ERROR_EXIT_CODE", "2")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.error_exit_code == 2


@pytest.mark.parametrize("fields", [
    {"log_level": "LOUD"},
    {"error_exit_code": 0},
    {"error_exit_code": 256},
    {"error_exit_code": 512},
])
def test_settings_invalid(fields) -> None:
    """Unknown levels and exit codes that would read as success are rejected."""
    with pytest.raises(ValidationError):
        Settings(**fields)


def test_configure_logging_sets_level() -> None:
    """configure_logging updates the level and installs a single handler."""
    configure_logging("info")
    configure_logging("debug")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    configure_logging("WARNING")
