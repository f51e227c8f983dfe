"""Availability probe for a single candidate port."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from port_picker.types.network import BindOutcome, PortProtocol

from .utils import logger

if TYPE_CHECKING:
    from port_picker.backend import IPAddress, NetworkBackend


def order_addresses(addresses: Iterable[IPAddress]) -> list[IPAddress]:
    """Sort addresses IPv4 first, ascending within each family."""
    return sorted(addresses, key=lambda address: (address.version, int(address)))


def is_port_free(
    port: int,
    *,
    addresses: Iterable[IPAddress],
    protocol: PortProtocol,
    backend: NetworkBackend,
) -> bool:
    """Check whether a port can be bound on every address for every transport.

    A bind reported as in use disqualifies the port immediately. Other bind
    failures skip that (address, transport) pair. The port is free only if at
    least one pair actually bound.

    Args:
        port: Candidate port.
        addresses: Addresses to probe.
        protocol: Protocol selection; ALL probes TCP then UDP.
        backend: Backend performing the binds.

    Returns:
        True if the port is available.
    """
    tested = False
    for address in addresses:
        for transport in protocol.transports:
            outcome = backend.try_bind(address=address, port=port, protocol=transport)
            if outcome is BindOutcome.IN_USE:
                logger.debug(f"Port {port} is not free on {address}/{transport}")
                return False
            if outcome is BindOutcome.BOUND:
                tested = True

    if not tested:
        logger.debug(f"Port {port} could not be tested on any address")
    return tested


__all__ = ["is_port_free", "order_addresses"]
