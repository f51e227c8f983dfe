"""port-picker - find a free network port on the local machine"""

from port_picker.core.errors import (
    HostEnumerationFailedError,
    InvalidHostError,
    InvalidOptionError,
    InvalidRangeError,
    NoAvailablePortError,
    PortPickerError,
)
from port_picker.core.utils import logger, setup_port_picker_logging
from port_picker.picker import PortPicker
from port_picker.types import MAX_PORT, MIN_PORT, PortPickerConfig, PortProtocol

__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "HostEnumerationFailedError",
    "InvalidHostError",
    "InvalidOptionError",
    "InvalidRangeError",
    "NoAvailablePortError",
    "PortPicker",
    "PortPickerConfig",
    "PortPickerError",
    "PortProtocol",
    "logger",
    "setup_port_picker_logging",
]
