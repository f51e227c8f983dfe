"""Network backend abstraction for port probing.

This package provides a Protocol for network backends and an OS implementation.
"""

from .protocol import IPAddress, NetworkBackend
from .system import SystemBackend

# Default backend instance
_default_backend: NetworkBackend = SystemBackend()


def get_default_backend() -> NetworkBackend:
    """Get the default network backend (operating system)."""
    return _default_backend


__all__ = [
    "IPAddress",
    "NetworkBackend",
    "SystemBackend",
    "get_default_backend",
]
