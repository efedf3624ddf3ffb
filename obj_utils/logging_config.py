"""Logging setup for applications embedding obj_utils."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

from .config import settings

LOGGER_NAME = "obj_utils"

_configured = False


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a stderr handler to the package logger, once."""
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    if _configured:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    _configured = True
    return logger
