"""Counting how often each value has been seen."""

from __future__ import annotations

from collections import Counter
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class ValueCounter(Generic[T]):
    """Counts the number of times each value has been seen."""

    def __init__(self) -> None:
        self._values: Counter[T] = Counter()

    def count(self, value: T) -> None:
        """Count an occurrence of the given value."""
        self._values[value] += 1

    def times_seen(self, value: T) -> int:
        """Return the number of times the given value has been seen."""
        return self._values[value]


def main(argv=None) -> None:
    counter: ValueCounter[int] = ValueCounter()
    for value in (13, 14, 16, 14, 14, 11):
        counter.count(value)
    for value in range(10, 20):
        print(f"saw {counter.times_seen(value)} values equal to {value}")

    fruit: ValueCounter[str] = ValueCounter()
    for name in ("apple", "orange", "apple"):
        fruit.count(name)
    print(f"got {fruit.times_seen('apple')} apples")


if __name__ == "__main__":
    main()