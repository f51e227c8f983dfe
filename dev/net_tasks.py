"""Tasks for inspecting what the picker sees on this machine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from invoke.tasks import task

if TYPE_CHECKING:
    from invoke.context import Context

from dev.utils import logging_utils
from port_picker import PortPicker, PortPickerError, setup_port_picker_logging
from port_picker.backend import get_default_backend
from port_picker.core.probe import order_addresses


@task(name="interfaces")
@logging_utils.with_banner()
def interfaces(ctx: Context) -> None:
    """List the local addresses probed when no host is set."""
    addresses = order_addresses(get_default_backend().list_local_addresses())
    logging_utils.print_list(["Local addresses:", *(str(address) for address in addresses)])


@task(
    name="pick",
    help={
        "start": "First port of the range.",
        "end": "Last port of the range.",
        "protocol": "tcp, udp or all.",
        "host": "Address to check. Defaults to every local address.",
        "random": "Pick a random free port.",
        "verbose": "Log every probe.",
    },
)
@logging_utils.with_banner()
def pick(
    ctx: Context,
    start: int = 1024,
    end: int = 65535,
    protocol: str = "all",
    host: str | None = None,
    random: bool = False,
    verbose: bool = False,
) -> None:
    """Pick a free port with the given options."""
    if verbose:
        setup_port_picker_logging("DEBUG")

    picker = PortPicker().port_range(start, end).protocol(protocol).random(random)
    if host:
        picker.host(host)

    try:
        port = picker.pick()
    except PortPickerError as e:
        logging_utils.print_failure("No port picked", error=str(e))
        raise SystemExit(1) from e

    logging_utils.print_success("Picked free port", Port=port)
