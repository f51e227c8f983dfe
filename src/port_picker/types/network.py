"""Network-related type definitions for port probing."""

from __future__ import annotations

from enum import StrEnum


class PortProtocol(StrEnum):
    """Transport protocol(s) that must be free for a port to qualify."""

    TCP = "tcp"
    UDP = "udp"
    ALL = "all"

    @property
    def transports(self) -> tuple[PortProtocol, ...]:
        """Concrete transports to probe, TCP first."""
        if self is PortProtocol.ALL:
            return (PortProtocol.TCP, PortProtocol.UDP)
        return (self,)


class BindOutcome(StrEnum):
    """Result of a single transient bind attempt."""

    BOUND = "bound"  # Bind succeeded, socket released
    IN_USE = "in_use"  # Another socket holds the address
    SKIPPED = "skipped"  # Environmental failure (permission, family, address not available)


__all__ = [
    "BindOutcome",
    "PortProtocol",
]
