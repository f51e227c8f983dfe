"""Environment-driven defaults for PortPicker.

Environment variables use the PORT_PICKER_ prefix.

Example environment variables:
    PORT_PICKER_RANGE_START=8000
    PORT_PICKER_RANGE_END=9000
    PORT_PICKER_EXCLUDE=[8080, 8443]
    PORT_PICKER_PROTOCOL=tcp
    PORT_PICKER_HOST=127.0.0.1
    PORT_PICKER_RANDOM=true
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from port_picker.types.config import MAX_PORT, MIN_PORT
from port_picker.types.network import PortProtocol


class PortPickerSettings(BaseSettings):
    """Default picker options read from the environment."""

    model_config = SettingsConfigDict(env_prefix="PORT_PICKER_")

    range_start: int = MIN_PORT
    """First port of the inclusive range."""

    range_end: int = MAX_PORT
    """Last port of the inclusive range."""

    exclude: set[int] = set()
    """Ports to skip. Read from the environment as a JSON list."""

    protocol: PortProtocol = PortProtocol.ALL
    """Transport(s) that must be free."""

    host: str | None = None
    """Address to check. If unset, every local address is checked."""

    random: bool = False
    """Pick a random free port instead of the lowest one."""


@lru_cache
def get_settings() -> PortPickerSettings:
    """Get picker settings (cached)."""
    return PortPickerSettings()


__all__ = [
    "PortPickerSettings",
    "get_settings",
]
