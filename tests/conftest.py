"""Pytest configuration for all tests."""

from __future__ import annotations

import socket
from dataclasses import dataclass, field
from ipaddress import IPv4Address, IPv6Address

import pytest

from port_picker.backend import IPAddress
from port_picker.types import BindOutcome, PortProtocol


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that bind real sockets")


@dataclass
class FakeBackend:
    """In-memory NetworkBackend.

    Every (address, port, protocol) is free unless listed in `in_use` or
    `skipped`. All bind attempts are recorded in `bind_calls`.
    """

    addresses: set[IPAddress] = field(default_factory=lambda: {IPv4Address("127.0.0.1"), IPv6Address("::1")})
    in_use: set[tuple[IPAddress | None, int, PortProtocol]] = field(default_factory=set)
    skipped: set[IPAddress] = field(default_factory=set)
    bind_calls: list[tuple[IPAddress, int, PortProtocol]] = field(default_factory=list)
    enumeration_calls: int = 0

    def list_local_addresses(self) -> set[IPAddress]:
        self.enumeration_calls += 1
        return set(self.addresses)

    def try_bind(self, *, address: IPAddress, port: int, protocol: PortProtocol) -> BindOutcome:
        self.bind_calls.append((address, port, protocol))
        if (address, port, protocol) in self.in_use or (None, port, protocol) in self.in_use:
            return BindOutcome.IN_USE
        if address in self.skipped:
            return BindOutcome.SKIPPED
        return BindOutcome.BOUND

    def occupy(self, port: int, protocol: PortProtocol = PortProtocol.TCP, address: IPAddress | None = None) -> None:
        """Mark a port as in use on one address, or on every address if None."""
        self.in_use.add((address, port, protocol))

    @property
    def probed_ports(self) -> list[int]:
        """Distinct probed ports, in first-probe order."""
        return list(dict.fromkeys(port for _, port, _ in self.bind_calls))


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


def _ipv6_loopback_available() -> bool:
    if not socket.has_ipv6:
        return False
    try:
        with socket.socket(socket.AF_INET6, socket.SOCK_STREAM) as s:
            s.bind(("::1", 0))
    except OSError:
        return False
    return True


@pytest.fixture(scope="session")
def ipv6_loopback() -> bool:
    """True if the machine can bind on ::1."""
    return _ipv6_loopback_available()
