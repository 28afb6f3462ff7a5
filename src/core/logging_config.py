"""Structured logging configuration.

This module initializes structlog with a stable JSON line format.
Events go to stderr so classifier output on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL
from core.errors import TextcatConfigError

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
_configured = False


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog output and level filtering.

    Args:
        level: Lowest emitted level name.

    Raises:
        TextcatConfigError: If the level name is unsupported.
    """
    global _configured
    if level not in _LEVELS:
        raise TextcatConfigError(
            f"Unsupported log level '{level}'. Supported levels: {', '.join(_LEVELS)}."
        )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LEVELS[level]),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
