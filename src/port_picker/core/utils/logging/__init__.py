"""Logging utilities for port_picker package."""

import logging
import sys

# Create global logger instance
logger = logging.getLogger("PortPicker")


def setup_port_picker_logging(level: int | str = logging.INFO) -> None:
    """
    Setup logging with a clean format for the port_picker package.

    Args:
        level: Logging level, as an int or a level name like "DEBUG" (default: INFO)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    logging_handler = logging.StreamHandler(sys.stdout)
    logging_formatter = logging.Formatter("[PortPicker] [%(levelname)s] %(message)s")

    logging_handler.setFormatter(logging_formatter)
    logger.addHandler(logging_handler)
    logger.setLevel(level)
    logger.propagate = False  # Don't propagate to root logger


__all__ = [
    "logger",
    "setup_port_picker_logging",
]
