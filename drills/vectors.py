"""Magnitude and normalisation of vectors."""

from __future__ import annotations

import math
from typing import Sequence


def magnitude(vector: Sequence[float]) -> float:
    """Return the Euclidean length of the vector."""
    return math.sqrt(sum(coord * coord for coord in vector))


def normalize(vector: Sequence[float]) -> list[float]:
    """Return the vector scaled to length 1.0 with the same direction."""
    length = magnitude(vector)
    if length == 0:
        raise ValueError("cannot normalize a zero vector")
    return [coord / length for coord in vector]


def main(argv=None) -> None:
    print(f"Magnitude of a unit vector: {magnitude([0.0, 1.0, 0.0])}")
    v = [1.0, 2.0, 9.0]
    print(f"Magnitude of {v}: {magnitude(v)}")
    v = normalize(v)
    print(f"Magnitude of {v} after normalization: {magnitude(v)}")


if __name__ == "__main__":
    main()