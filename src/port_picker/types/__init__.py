"""Type definitions for port_picker."""

from .config import MAX_PORT, MIN_PORT, PortPickerConfig
from .network import BindOutcome, PortProtocol

__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "BindOutcome",
    "PortPickerConfig",
    "PortProtocol",
]
