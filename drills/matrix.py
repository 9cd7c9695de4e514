"""Matrix transposition."""

from __future__ import annotations

from pprint import pformat
from typing import Sequence, TypeVar

T = TypeVar("T")


def transpose(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Return the transpose of a rectangular matrix."""
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*rows)]


def main(argv=None) -> None:
    matrix = [
        [101, 102, 103],
        [201, 202, 203],
        [301, 302, 303],
    ]
    print(f"matrix: {pformat(matrix, width=20)}")
    print(f"transposed: {pformat(transpose(matrix), width=20)}")


if __name__ == "__main__":
    main()