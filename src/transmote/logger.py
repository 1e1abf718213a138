"""Logging setup and colored log helpers for transmote."""

import logging
import sys
from enum import Enum
from typing import TextIO

import click
from uvicorn.logging import DefaultFormatter

LOGGER_NAME = "transmote"
LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


class LogColor(Enum):
    """Colors of the styled helpers. INFO messages are left unstyled."""

    SUCCESS = "green"
    HEADER = "yellow"
    SECTION = "blue"
    DEBUG = "cyan"
    WARNING = "yellow"
    ERROR = "red"
    CRITICAL = "bright_red"


def setup_logger(loglevel: str = "info", stream: TextIO | None = None) -> logging.Logger:
    """Configure the transmote logger with uvicorn-style level prefixes.

    Args:
        loglevel: Log level name, one of ``LOG_LEVELS``.
        stream: Output stream, stderr when omitted.

    Returns:
        logging.Logger: The configured package logger.

    Raises:
        ValueError: If the log level is unknown.
    """
    if loglevel.lower() not in LOG_LEVELS:
        raise ValueError(f"Invalid loglevel '{loglevel}'. Must be one of: {LOG_LEVELS}")

    pkg_logger = logging.getLogger(LOGGER_NAME)
    pkg_logger.setLevel(loglevel.upper())

    # Calling setup twice must not duplicate output
    pkg_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(DefaultFormatter(fmt="%(levelprefix)s %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False

    return pkg_logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a named child of it."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return _logger


_logger = logging.getLogger(LOGGER_NAME)


def _styled(level: int, color: LogColor):
    def log(msg, *args, **kwargs):
        _logger.log(level, click.style(str(msg), fg=color.value), *args, **kwargs)

    return log


success = _styled(logging.INFO, LogColor.SUCCESS)
header = _styled(logging.INFO, LogColor.HEADER)
section = _styled(logging.INFO, LogColor.SECTION)
debug = _styled(logging.DEBUG, LogColor.DEBUG)
warning = _styled(logging.WARNING, LogColor.WARNING)
error = _styled(logging.ERROR, LogColor.ERROR)
critical = _styled(logging.CRITICAL, LogColor.CRITICAL)


def info(msg, *args, **kwargs):
    _logger.info(msg, *args, **kwargs)
