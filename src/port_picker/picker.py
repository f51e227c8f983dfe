"""PortPicker: find a free port on the local machine.

This module provides the PortPicker builder, which is configured through
chained setters and then probes candidate ports with real bind attempts.
"""

from __future__ import annotations

import random as _random
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from port_picker.backend import get_default_backend
from port_picker.core.candidates import generate_candidates
from port_picker.core.errors import (
    HostEnumerationFailedError,
    InvalidHostError,
    InvalidOptionError,
    InvalidRangeError,
    NoAvailablePortError,
)
from port_picker.core.probe import is_port_free, order_addresses
from port_picker.core.utils import logger
from port_picker.settings import get_settings
from port_picker.types.config import MAX_PORT, MIN_PORT, PortPickerConfig
from port_picker.types.network import PortProtocol

if TYPE_CHECKING:
    from port_picker.backend import IPAddress, NetworkBackend
    from port_picker.core.candidates import Shuffle
    from port_picker.settings import PortPickerSettings


class PortPicker:
    """Picks a free port in the local machine.

    Defaults: range 1024..65535, no exclusions, both TCP and UDP, every local
    address, lowest free port first.

    Args:
        backend: Optional network backend. If None, uses the operating system.
        shuffle: Optional in-place list shuffle used in random mode.
            If None, uses random.shuffle.

    Example:
        >>> port = PortPicker().port_range(8000, 9000).protocol("tcp").pick()
        >>> print(f"The free port is {port}")
    """

    def __init__(
        self,
        *,
        backend: NetworkBackend | None = None,
        shuffle: Shuffle | None = None,
    ) -> None:
        self.backend = backend or get_default_backend()
        self.shuffle = shuffle or _random.shuffle
        self._range: tuple[int, int] = (MIN_PORT, MAX_PORT)
        self._exclude: set[int] = set()
        self._protocol: PortProtocol | str = PortProtocol.ALL
        self._host: str | None = None
        self._random = False

    @classmethod
    def from_settings(cls, settings: PortPickerSettings | None = None, **kwargs: Any) -> PortPicker:
        """Create a picker whose options come from PortPickerSettings.

        Args:
            settings: Settings to use. If None, reads them from the environment.
            **kwargs: Forwarded to the constructor (backend, shuffle).
        """
        settings = settings or get_settings()
        picker = (
            cls(**kwargs)
            .port_range(settings.range_start, settings.range_end)
            .exclude(settings.exclude)
            .protocol(settings.protocol)
            .random(settings.random)
        )
        if settings.host is not None:
            picker.host(settings.host)
        return picker

    def port_range(self, start: int, end: int) -> PortPicker:
        """Specifies the inclusive range of ports to check. Must be within 1024..65535."""
        self._range = (start, end)
        return self

    def exclude(self, ports: Iterable[int]) -> PortPicker:
        """Specifies the ports to exclude, replacing any previous exclusions."""
        self._exclude = set(ports)
        return self

    def exclude_add(self, port: int) -> PortPicker:
        """Adds a port to exclude."""
        self._exclude.add(port)
        return self

    def protocol(self, protocol: PortProtocol | str) -> PortPicker:
        """Specifies the protocol to check: "tcp", "udp" or "all" (default)."""
        self._protocol = protocol
        return self

    def host(self, host: str) -> PortPicker:
        """Specifies the host to check, as an IPv4 or IPv6 address.

        If not specified, availability is checked on all local addresses.
        """
        self._host = host
        return self

    def random(self, random: bool) -> PortPicker:
        """Specifies whether to pick a random free port instead of the lowest one."""
        self._random = random
        return self

    @property
    def config(self) -> PortPickerConfig:
        """Validated snapshot of the current options.

        Raises:
            InvalidRangeError: If the range is inverted or outside 1024..65535.
            InvalidHostError: If the host is not an IP address.
            InvalidOptionError: If any other option is invalid.
        """
        try:
            return PortPickerConfig(
                port_range=self._range,
                excluded=frozenset(self._exclude),
                protocol=self._protocol,
                host=self._host,
                randomize=self._random,
            )
        except ValidationError as e:
            raise self._translate_validation_error(e) from e

    def pick(self) -> int:
        """Probe candidate ports and return the first free one.

        Returns:
            A port that could be bound on every target address for every
            requested transport at the time of the check.

        Raises:
            InvalidRangeError: If the range is invalid. No port is probed.
            InvalidHostError: If the host is not an IP address.
            HostEnumerationFailedError: If no host is set and no local address is found.
            NoAvailablePortError: If every candidate is in use.
        """
        config = self.config
        addresses = self._target_addresses(config)
        candidates = generate_candidates(
            config.low,
            config.high,
            excluded=config.excluded,
            shuffle=self.shuffle if config.randomize else None,
        )

        logger.debug(
            f"Probing {len(candidates)} candidate ports in {config.low}-{config.high} "
            f"on {len(addresses)} addresses ({config.protocol}, random={config.randomize})"
        )
        for port in candidates:
            if is_port_free(port, addresses=addresses, protocol=config.protocol, backend=self.backend):
                logger.info(f"Picked free port {port}")
                return port

        raise NoAvailablePortError()

    def is_available(self, port: int) -> bool:
        """Check a single port against the configured host and protocol.

        Range and exclusions are not applied.

        Raises:
            InvalidOptionError: If the port is not between 0 and 65535 or the options are invalid.
            HostEnumerationFailedError: If no host is set and no local address is found.
        """
        if not 0 <= port <= MAX_PORT:
            raise InvalidOptionError(f"The port {port} must be between 0 and {MAX_PORT}")
        config = self.config
        return is_port_free(
            port,
            addresses=self._target_addresses(config),
            protocol=config.protocol,
            backend=self.backend,
        )

    def _target_addresses(self, config: PortPickerConfig) -> list[IPAddress]:
        if config.host is not None:
            return [config.host]

        addresses = self.backend.list_local_addresses()
        if not addresses:
            raise HostEnumerationFailedError("No local interface address found")
        return order_addresses(addresses)

    def _translate_validation_error(self, error: ValidationError) -> InvalidOptionError:
        details = error.errors()[0]
        field = details["loc"][0] if details["loc"] else None
        cause = details.get("ctx", {}).get("error")
        message = str(cause) if cause else details["msg"]

        if field == "port_range":
            return InvalidRangeError(message)
        if field == "host":
            return InvalidHostError(f"The host {self._host} is not a valid IP address")
        return InvalidOptionError(f"Invalid {field}: {message}")


__all__ = ["PortPicker"]
