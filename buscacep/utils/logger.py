"""
Logging configuration module
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO
from datetime import datetime


class LocalTimeFormatter(logging.Formatter):
    """Formatter that renders record times in the local timezone."""

    def formatTime(self, record, datefmt=None):
        ct = datetime.fromtimestamp(record.created)
        return ct.strftime(datefmt or self.default_time_format)


def setup_logger(
    name: str = "buscacep",
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Console output goes to stderr by default so that lookup results
    printed on stdout are not interleaved with log lines.

    Args:
        name: Logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for file logging
        stream: Console stream (defaults to sys.stderr)

    Returns:
        Configured logger instance
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = LocalTimeFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
