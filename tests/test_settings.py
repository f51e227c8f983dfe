"""Tests for environment-driven picker settings."""

from ipaddress import IPv4Address

import pytest

from port_picker import InvalidRangeError, PortPicker, PortProtocol
from port_picker.settings import PortPickerSettings, get_settings


def test_settings_defaults(monkeypatch):
    """Verify settings defaults match the picker defaults."""
    for name in ("RANGE_START", "RANGE_END", "EXCLUDE", "PROTOCOL", "HOST", "RANDOM"):
        monkeypatch.delenv(f"PORT_PICKER_{name}", raising=False)

    settings = PortPickerSettings()

    assert (settings.range_start, settings.range_end) == (1024, 65535)
    assert settings.exclude == set()
    assert settings.protocol is PortProtocol.ALL
    assert settings.host is None
    assert settings.random is False


def test_settings_from_env(monkeypatch):
    """Verify PORT_PICKER_ environment variables are read."""
    monkeypatch.setenv("PORT_PICKER_RANGE_START", "8000")
    monkeypatch.setenv("PORT_PICKER_RANGE_END", "9000")
    monkeypatch.setenv("PORT_PICKER_EXCLUDE", "[8000, 8001]")
    monkeypatch.setenv("PORT_PICKER_PROTOCOL", "udp")
    monkeypatch.setenv("PORT_PICKER_HOST", "127.0.0.1")
    monkeypatch.setenv("PORT_PICKER_RANDOM", "true")

    settings = PortPickerSettings()

    assert (settings.range_start, settings.range_end) == (8000, 9000)
    assert settings.exclude == {8000, 8001}
    assert settings.protocol is PortProtocol.UDP
    assert settings.host == "127.0.0.1"
    assert settings.random is True


def test_picker_from_settings(fake_backend):
    """Verify from_settings applies every option."""
    settings = PortPickerSettings(
        range_start=8000,
        range_end=9000,
        exclude={8000},
        protocol=PortProtocol.TCP,
        host="127.0.0.1",
        random=False,
    )

    picker = PortPicker.from_settings(settings, backend=fake_backend)

    config = picker.config
    assert config.port_range == (8000, 9000)
    assert config.excluded == frozenset({8000})
    assert config.protocol is PortProtocol.TCP
    assert config.host == IPv4Address("127.0.0.1")
    assert picker.pick() == 8001


def test_picker_from_cached_settings(monkeypatch, fake_backend):
    """Verify from_settings falls back to get_settings()."""
    monkeypatch.setenv("PORT_PICKER_RANGE_START", "7000")
    monkeypatch.setenv("PORT_PICKER_RANGE_END", "7001")
    get_settings.cache_clear()

    try:
        assert PortPicker.from_settings(backend=fake_backend).pick() == 7000
    finally:
        get_settings.cache_clear()


@pytest.mark.parametrize("start, end", [(80, 100), (9000, 8000)])
def test_invalid_settings_range_reported_on_pick(fake_backend, start, end):
    """Verify settings are validated like any other options."""
    picker = PortPicker.from_settings(PortPickerSettings(range_start=start, range_end=end), backend=fake_backend)

    with pytest.raises(InvalidRangeError):
        picker.pick()
