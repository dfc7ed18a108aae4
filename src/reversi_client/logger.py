"""Logging setup for the command line entry point.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once, by whoever runs the client.
"""

import logging
import sys
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    log_level=logging.INFO,
    log_file=None,
    log_format=DEFAULT_FORMAT,
    date_format=DEFAULT_DATE_FORMAT,
    show_console=True,
):
    """
    Configure the root logger.

    Args:
        log_level: level name ("DEBUG") or number (logging.DEBUG)
        log_file: optional path of a UTF-8 log file; parent directories are created
        log_format: format string for every handler
        date_format: date format for every handler
        show_console: attach a stdout handler
    """
    if isinstance(log_level, str):
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {log_level!r}")
        log_level = level

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers so repeated setup does not duplicate output.
    root_logger.handlers.clear()

    formatter = logging.Formatter(log_format, datefmt=date_format)

    if show_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
