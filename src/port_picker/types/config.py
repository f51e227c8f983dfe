"""Validated configuration snapshot consumed by PortPicker.pick()."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress, field_validator

from .network import PortProtocol

MIN_PORT = 1024
MAX_PORT = 65535


class PortPickerConfig(BaseModel):
    """Immutable picker configuration.

    Attributes:
        port_range: Inclusive (low, high) range of candidate ports.
        excluded: Ports skipped regardless of availability.
        protocol: Transport(s) that must be free.
        host: Address to probe. None means every local interface address.
        randomize: Visit candidates in a random permutation instead of ascending order.
    """

    model_config = ConfigDict(frozen=True)

    port_range: tuple[int, int] = Field(default=(MIN_PORT, MAX_PORT), description="Inclusive port range")
    excluded: frozenset[int] = Field(default=frozenset(), description="Ports to skip")
    protocol: PortProtocol = Field(default=PortProtocol.ALL, description="Transport(s) to check")
    host: IPvAnyAddress | None = Field(default=None, description="Address to check, or all local addresses")
    randomize: bool = Field(default=False, description="Random candidate ordering")

    @field_validator("port_range")
    @classmethod
    def validate_port_range(cls, value: tuple[int, int]) -> tuple[int, int]:
        low, high = value
        if low > high:
            raise ValueError("The start port must be less than or equal to the end port")
        if low < MIN_PORT or high > MAX_PORT:
            raise ValueError(f"The port range must be between {MIN_PORT} and {MAX_PORT}")
        return value

    @field_validator("excluded")
    @classmethod
    def validate_excluded(cls, value: frozenset[int]) -> frozenset[int]:
        invalid = sorted(port for port in value if not 0 <= port <= MAX_PORT)
        if invalid:
            raise ValueError(f"Excluded ports must be between 0 and {MAX_PORT}, got {invalid}")
        return value

    @property
    def low(self) -> int:
        return self.port_range[0]

    @property
    def high(self) -> int:
        return self.port_range[1]


__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "PortPickerConfig",
]
