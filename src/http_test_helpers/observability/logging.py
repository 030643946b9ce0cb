"""Shared logging utilities for the HTTP test helpers.

Helpers stay quiet by default so they do not clutter test output. Set
`HTTP_TEST_LOG_LEVEL=DEBUG` to trace builder activity.

Helper loggers do not propagate, so pytest's `caplog` never sees their records;
attach a handler to the named logger to capture them.

Usage example:
    from http_test_helpers.observability import get_logger

    logger = get_logger("http_test_helpers.builder")
    logger.debug("Built response: status=%s", status_code)
"""

from __future__ import annotations

import logging
import os
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_LOG_LEVEL_ENV = "HTTP_TEST_LOG_LEVEL"
_DEFAULT_LEVEL = logging.WARNING


def resolve_log_level(value: str | None) -> int:
    """Map a level name (or number) to a logging level, falling back to WARNING."""
    if not value:
        return _DEFAULT_LEVEL
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def get_logger(name: str) -> logging.Logger:
    """Return a standard logger configured for UTC timestamps.

    Args:
        name: Logger name (use a stable module-qualified name).

    Returns:
        A logger with a single stream handler, a consistent UTC format and the
        level named by HTTP_TEST_LOG_LEVEL.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(resolve_log_level(os.getenv(_LOG_LEVEL_ENV)))
        logger.propagate = False
    return logger
