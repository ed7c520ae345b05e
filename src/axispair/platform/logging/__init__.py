"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helpers, and the Rich handler.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import (
    LOGGER_NAME,
    level_from_name,
    logger,
    setup_logger,
    setup_logger_from_config,
)
from .handlers import AxisRichHandler

__all__ = [
    "LOGGER_NAME",
    "AxisRichHandler",
    "level_from_name",
    "logger",
    "setup_logger",
    "setup_logger_from_config",
]
