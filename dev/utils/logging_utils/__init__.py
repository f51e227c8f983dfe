"""CLI output formatting for invoke tasks using Rich.

Requirements:
    Rich library (dev dependency): uv sync --group dev

Usage:
    from dev.utils import logging_utils

    logging_utils.print_info("Running tests...")
    logging_utils.print_success("Picked free port", Port=8080)
"""

from .console import console
from .printers import (
    print_banner,
    print_failure,
    print_info,
    print_list,
    print_success,
    with_banner,
)

__all__ = [
    "console",
    "print_banner",
    "print_failure",
    "print_info",
    "print_list",
    "print_success",
    "with_banner",
]
