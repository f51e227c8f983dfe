from .logging import logger, setup_port_picker_logging

__all__ = [
    "logger",
    "setup_port_picker_logging",
]
