"""Logging setup for the timeline TUI.

Lines look like ``[2024-01-15 10:00:00] INFO: message``. The TUI owns the
terminal, so records only go to a file; without one they are discarded.
Setting ``DEBUG=1`` in the environment forces debug level.
"""

import logging
import os

LOGGER_NAME = "timeline_tui"
LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def _format(level: str, message: str) -> str:
    """Format one record the way the file handler does."""
    record = logging.LogRecord(LOGGER_NAME, _LEVELS[level], "", 0, message, None, None)
    return logging.Formatter(LOG_FORMAT, DATE_FORMAT).format(record)


def resolve_level(log_level: str) -> int:
    """Map a level name to a logging level, honouring the DEBUG env override.

    Raises:
        ValueError: If the level name is unknown.
    """
    if os.environ.get("DEBUG", "") not in ("", "0"):
        return logging.DEBUG
    try:
        return _LEVELS[log_level.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {log_level}") from None


def init(log_level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Configure the package logger.

    Safe to call more than once; handlers from a previous call are closed.

    Args:
        log_level: DEBUG, INFO, WARN/WARNING or ERROR.
        log_file: File to append records to, or None to discard them.

    Returns:
        The configured ``timeline_tui`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.setLevel(resolve_level(log_level))
    logger.propagate = False
    return logger
