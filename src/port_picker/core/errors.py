"""Exceptions raised by port_picker."""

from __future__ import annotations


class PortPickerError(Exception):
    """Base class for all port_picker errors."""


class InvalidOptionError(PortPickerError, ValueError):
    """Raised when a picker option fails validation."""


class InvalidRangeError(InvalidOptionError):
    """Raised when the port range is inverted or outside 1024..65535."""


class InvalidHostError(InvalidOptionError):
    """Raised when the host is not an IPv4 or IPv6 literal."""


class HostEnumerationFailedError(PortPickerError):
    """Raised when no local interface address could be enumerated."""


class NoAvailablePortError(PortPickerError):
    """Raised when every candidate port was probed and none is free."""

    def __init__(self, message: str = "No available port") -> None:
        super().__init__(message)


__all__ = [
    "HostEnumerationFailedError",
    "InvalidHostError",
    "InvalidOptionError",
    "InvalidRangeError",
    "NoAvailablePortError",
    "PortPickerError",
]
