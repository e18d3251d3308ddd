"""Logging setup for the `recordview` logger hierarchy."""

import logging
import sys
from typing import Optional

from .config import get_settings

LOGGER_NAME = "recordview"


def configure_logging(level: Optional[str] = None, stream=None) -> logging.Logger:
    """Attach a stream handler to the package logger (root logger untouched)."""
    level = (level or get_settings().log_level).upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level, logging.WARNING))

    for handler in list(logger.handlers):
        if getattr(handler, "_recordview", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler._recordview = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
