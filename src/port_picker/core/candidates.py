"""Candidate port sequence generation."""

from __future__ import annotations

from collections.abc import Callable, Collection

# Shuffles a list in place, e.g. random.shuffle or random.Random(seed).shuffle
Shuffle = Callable[[list[int]], None]


def generate_candidates(
    low: int,
    high: int,
    excluded: Collection[int] = (),
    shuffle: Shuffle | None = None,
) -> list[int]:
    """Build the ordered list of ports to probe.

    Args:
        low: First port of the inclusive range.
        high: Last port of the inclusive range.
        excluded: Ports to leave out.
        shuffle: If given, applied to the eligible ports to produce a random
            permutation. Otherwise ports are returned in ascending order.

    Returns:
        Eligible ports, each exactly once.
    """
    candidates = [port for port in range(low, high + 1) if port not in excluded]
    if shuffle is not None:
        shuffle(candidates)
    return candidates


__all__ = ["Shuffle", "generate_candidates"]
