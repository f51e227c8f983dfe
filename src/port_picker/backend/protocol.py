"""Network backend protocol definition.

Defines the OS-facing operations needed by the availability probe, so that
machine topology and socket behavior can be replaced in tests.
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from typing import Protocol

from port_picker.types.network import BindOutcome, PortProtocol

IPAddress = IPv4Address | IPv6Address


class NetworkBackend(Protocol):
    """Protocol for network backend implementations."""

    def list_local_addresses(self) -> set[IPAddress]:
        """List the addresses configured on the local network interfaces.

        Returns:
            Set of local addresses at call time, loopback included.

        Raises:
            HostEnumerationFailedError: If the interfaces cannot be enumerated.
        """
        ...

    def try_bind(self, *, address: IPAddress, port: int, protocol: PortProtocol) -> BindOutcome:
        """Bind a transient socket to (address, port) and release it.

        Args:
            address: Address to bind to.
            port: Port to bind to.
            protocol: Concrete transport, TCP or UDP.

        Returns:
            BindOutcome describing the attempt.
        """
        ...


__all__ = ["IPAddress", "NetworkBackend"]
