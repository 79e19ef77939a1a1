"""Centralized logging configuration and structured-context helpers."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

from constants import Constants

_CONFIGURED_FLAG = "_npmrange_configured"


def configure_logging() -> None:
    """Configure the root logger once.

    The level comes from the NPMRANGE_LOG_LEVEL environment variable
    (default INFO); the format from Constants.LOG_FORMAT. Calling this again
    only re-applies the level.
    """
    level_name = os.environ.get(Constants.ENV_LOG_LEVEL, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    if not getattr(root, _CONFIGURED_FLAG, False):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
        setattr(root, _CONFIGURED_FLAG, True)
    root.setLevel(level)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True if DEBUG records from logger would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured log records, dropping None values."""
    return {key: value for key, value in fields.items() if value is not None}
