"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Expose the package logger and the helper that attaches handlers to it.
Why: A library stays silent until its host application opts into output.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import TYPE_CHECKING, Final

from rich.console import Console

from .handlers import AxisRichHandler

if TYPE_CHECKING:
    from axispair.config.config import Config


LOGGER_NAME: Final[str] = "axispair"


def level_from_name(name: str, default: int) -> int:
    """Return the numeric level for ``name``, or ``default`` when unknown."""

    return logging.getLevelNamesMapping().get(name.strip().upper(), default)


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the package logger.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output. Defaults to INFO.
        file_level: Logging level for file output. Defaults to DEBUG.
        console: Rich console to write to. Defaults to a new terminal console.

    Returns:
        logging.Logger: Configured logger instance.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if console is None:
        console = Console(force_terminal=True, soft_wrap=True)
    console_handler = AxisRichHandler(console=console)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def setup_logger_from_config(config: Config, console: Console | None = None) -> logging.Logger:
    """Configure the package logger from a loaded ``Config``."""

    return setup_logger(
        log_file=config.log_file,
        console_level=level_from_name(config.console_level, logging.INFO),
        file_level=level_from_name(config.file_level, logging.DEBUG),
        console=console,
    )


logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


__all__ = [
    "LOGGER_NAME",
    "level_from_name",
    "logger",
    "setup_logger",
    "setup_logger_from_config",
]
