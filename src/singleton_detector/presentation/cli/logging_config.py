"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import os
import sys

from singleton_detector.domain.exceptions.usage import UsageError

LOG_LEVEL_ENV = "SINGLETON_DETECTOR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "singleton_detector.cli"


def configure_logging(level: str | None = None) -> int:
    """Attach one stderr handler to the package logger.

    Safe to call repeatedly: the handler is replaced, not duplicated.

    Args:
        level: Level name. Default: $SINGLETON_DETECTOR_LOG_LEVEL or WARNING.

    Returns:
        Numeric level applied

    Raises:
        UsageError: If the level name is unknown
    """
    name = level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    numeric = logging.getLevelNamesMapping().get(name.upper())
    if numeric is None:
        raise UsageError(f"unknown log level {name!r} in {LOG_LEVEL_ENV}")

    package_logger = logging.getLogger("singleton_detector")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric)
    return numeric
