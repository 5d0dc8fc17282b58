"""Project-wide logger."""
import logging
import sys

LOGGER_NAME: str = "postfix_calc"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: str = "WARNING") -> None:
    """
    Attach a stderr handler to the project logger and set its level.

    Standard output is reserved for the calculation result, so log records always go to stderr.
    Calling this more than once only updates the level.

    :param str level: Logging level name (e.g. "DEBUG", "INFO")
    """
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        # Keep records away from the root logger's handlers
        logger.propagate = False
    logger.setLevel(level.upper())
