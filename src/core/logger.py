"""Logging utilities."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "irating-fetch"


def setup_logger(name: str = LOGGER_NAME, level: int | None = None) -> logging.Logger:
    """Set up and configure a logger.

    Args:
        name: Logger name
        level: Logging level (defaults to INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO

    logger.setLevel(level)

    # stdout is reserved for the report table
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for handler in logger.handlers:
        # follow sys.stderr when it is swapped (CliRunner, PyInstaller console)
        if type(handler) is logging.StreamHandler:
            handler.setStream(sys.stderr)
        handler.setLevel(level)

    return logger


def get_logger(module: str) -> logging.Logger:
    """Child logger of the application logger (e.g. ``irating-fetch.client``)."""

    return logging.getLogger(f"{LOGGER_NAME}.{module}")
