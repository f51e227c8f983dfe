"""Basic print utilities using Rich."""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

from .console import Panel, Text, console

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def print_banner(title: str, data: dict[str, Any] | None = None) -> None:
    """Print a task banner with a title and optional key-value pairs.

    Example:
        >>> print_banner("PICK", {"Start": 8000, "Protocol": "tcp"})
        ╭────────────────── PICK ──────────────────╮
        │ Start: 8000                              │
        │ Protocol: tcp                            │
        ╰──────────────────────────────────────────╯
    """
    content = Text()
    for i, (key, value) in enumerate((data or {}).items()):
        if i > 0:
            content.append("\n")
        content.append(f"{key}: ", style="dim")
        content.append(str(value), style="cyan")
    console.print()
    console.print(Panel(content, style="blue", title=f"[bold]{title}[/]", title_align="center"))
    console.print()


def print_success(message: str = "SUCCESS", **details: Any) -> None:
    """Print a success message followed by optional details."""
    console.print()
    console.print(f"[bold green]✓ {message}[/]")
    for key, value in details.items():
        console.print(f"  [dim]{key}:[/] [cyan]{value}[/]")


def print_failure(message: str = "FAILED", error: str | None = None) -> None:
    """Print a failure message with optional error details."""
    console.print()
    console.print(f"[bold red]✗ {message}[/]")
    if error:
        console.print(f"  [dim]{error}[/]")


def print_list(lines: list[str], indent_rest: int = 2) -> None:
    """Print a list with the first line unindented and the rest indented."""
    if not lines:
        return
    console.print(lines[0])
    prefix = " " * indent_rest
    for line in lines[1:]:
        console.print(f"{prefix}{line}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"  {message}")


def with_banner(
    exclude: set[str] | None = None,
    include_false: bool = False,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator that prints a banner with the task name and its arguments.

    Args:
        exclude: Additional parameter names to leave out. "self" and "ctx" are always left out.
        include_false: If True, include parameters with False/None values (default: False).
    """
    effective_exclude = {"self", "ctx"} | (exclude or set())

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            bound = inspect.signature(func).bind(*args, **kwargs)
            bound.apply_defaults()

            title = func.__name__.replace("_", " ").upper()  # type: ignore[attr-defined]
            data = {
                name.replace("_", " ").title(): value
                for name, value in bound.arguments.items()
                if name not in effective_exclude and (include_false or value not in (None, False))
            }

            print_banner(title, data or None)
            return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "print_banner",
    "print_failure",
    "print_info",
    "print_list",
    "print_success",
    "with_banner",
]
