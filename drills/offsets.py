"""Differences between elements of a sequence and their cyclic offsets."""

from __future__ import annotations

from itertools import cycle, islice
from typing import Iterable, TypeVar

N = TypeVar("N")


def offset_differences(offset: int, values: Iterable[N]) -> list[N]:
    """Return ``values[(n + offset) % len] - values[n]`` for each ``n``.

    The offset wraps around from the end of ``values`` to the beginning.
    """
    values = list(values)
    shifted = islice(cycle(values), offset, None)
    return [later - current for current, later in zip(values, shifted)]