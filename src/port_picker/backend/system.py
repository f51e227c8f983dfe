"""System backend implementation.

Uses psutil to enumerate interface addresses and real sockets to probe binds.
"""

from __future__ import annotations

import errno
import socket
from ipaddress import IPv4Address, IPv6Address, ip_address

import psutil

from port_picker.core.errors import HostEnumerationFailedError
from port_picker.core.utils import logger
from port_picker.types.network import BindOutcome, PortProtocol

from .protocol import IPAddress

_SOCKET_TYPES = {
    PortProtocol.TCP: socket.SOCK_STREAM,
    PortProtocol.UDP: socket.SOCK_DGRAM,
}


class SystemBackend:
    """NetworkBackend backed by the operating system."""

    def list_local_addresses(self) -> set[IPAddress]:
        """List interface addresses plus the IPv4 and IPv6 unspecified addresses."""
        try:
            interfaces = psutil.net_if_addrs()
        except (OSError, psutil.Error) as e:
            raise HostEnumerationFailedError(f"Failed to enumerate local interfaces: {e}") from e

        addresses: set[IPAddress] = set()
        for name, snics in interfaces.items():
            for snic in snics:
                if snic.family not in (socket.AF_INET, socket.AF_INET6):
                    continue
                try:
                    addresses.add(ip_address(snic.address))
                except ValueError:
                    logger.debug(f"Ignoring unparsable address {snic.address!r} on interface {name}")

        if not addresses:
            raise HostEnumerationFailedError("No local interface address found")

        addresses.add(IPv4Address("0.0.0.0"))
        addresses.add(IPv6Address("::"))
        return addresses

    def try_bind(self, *, address: IPAddress, port: int, protocol: PortProtocol) -> BindOutcome:
        """Bind a transient socket and classify the result."""
        family = socket.AF_INET if address.version == 4 else socket.AF_INET6
        try:
            with socket.socket(family, _SOCKET_TYPES[protocol]) as sock:
                sock.bind(_to_sockaddr(address, port))
        except OSError as e:
            if e.errno == errno.EADDRINUSE:
                return BindOutcome.IN_USE
            logger.debug(f"Skipping {address}/{protocol} for port {port}: {e}")
            return BindOutcome.SKIPPED
        return BindOutcome.BOUND


def _to_sockaddr(address: IPAddress, port: int) -> tuple:
    """Build a bind() address tuple, resolving the interface index of scoped IPv6 addresses."""
    if isinstance(address, IPv6Address):
        scope_id = 0
        if address.scope_id:
            scope_id = int(address.scope_id) if address.scope_id.isdigit() else socket.if_nametoindex(address.scope_id)
        host = str(address).split("%", 1)[0]
        return (host, port, 0, scope_id)
    return (str(address), port)


__all__ = ["SystemBackend"]
