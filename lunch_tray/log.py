"""Logging utilities for lunch-tray."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_ROOT_LOGGER = "lunch_tray"
_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    console: bool = True,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to a log file (optional)
        console: Attach a stderr handler. The TUI turns this off so log
            lines never draw over the screen.
        format_string: Custom format string for log messages

    Returns:
        Configured logger instance
    """
    level_num = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level_num)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level_num)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level_num)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
