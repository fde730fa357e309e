"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the console and optional file handlers of the package logger.
Why: Let the CLI re-run setup with new levels without duplicating handlers.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from tagrename.config.settings import (
    FILE_LOG_FORMAT,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
    LOGGER_NAME,
)

from .handlers import WhitePathRichHandler


def _console_handler(level: int) -> logging.Handler:
    # stderr keeps stdout free for the result summary.
    handler = WhitePathRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    path = log_file.expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the ``tagrename`` logger.

    Existing handlers are closed and replaced, so calling this again only
    changes levels and targets.

    Args:
        log_file: Rotating log file to write in addition to the console.
        console_level: Threshold for console output.
        file_level: Threshold for the log file.

    Returns:
        logging.Logger: The package logger.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        package_logger.addHandler(_file_handler(Path(log_file), file_level))
    return package_logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["setup_logger", "logger"]
