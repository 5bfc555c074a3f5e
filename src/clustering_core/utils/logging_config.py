"""
Logging setup for clustering-core.

All modules obtain their logger through ``get_logger(__name__)`` so that
loggers nest under the ``clustering_core`` package logger, which
``setup_logging`` configures once.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from ..config import config

PACKAGE_LOGGER = "clustering_core"
DEFAULT_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Union[str, Path]] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger with consistent formatting.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG"). Defaults to
            ``config.logging.level``.
        log_file: Optional file to append logs to. Defaults to
            ``config.logging.log_file``.
        format_string: Custom format string

    Returns:
        The configured package logger
    """
    if level is None:
        level = config.logging.level
    if log_file is None:
        log_file = config.logging.log_file
    if format_string is None:
        format_string = DEFAULT_FORMAT

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for *name* (normally the calling module's ``__name__``)."""
    return logging.getLogger(name)
