"""Core modules for port_picker."""

from .errors import (
    HostEnumerationFailedError,
    InvalidHostError,
    InvalidOptionError,
    InvalidRangeError,
    NoAvailablePortError,
    PortPickerError,
)
from .utils.logging import setup_port_picker_logging

__all__ = [
    "HostEnumerationFailedError",
    "InvalidHostError",
    "InvalidOptionError",
    "InvalidRangeError",
    "NoAvailablePortError",
    "PortPickerError",
    "setup_port_picker_logging",
]
