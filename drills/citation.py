"""Citations ordered by author and then year, with a generic minimum."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar


class LessThan(Protocol):
    def less_than(self, other: "LessThan") -> bool:
        """Return True if self is less than other."""


T = TypeVar("T", bound=LessThan)


@dataclass(frozen=True)
class Citation:
    """A bibliographic citation."""

    author: str
    year: int

    def less_than(self, other: "Citation") -> bool:
        """Order by author first, then by year."""
        if self.author != other.author:
            return self.author < other.author
        return self.year < other.year


def lesser(left: T, right: T) -> T:
    """Return ``left`` if it is less than ``right``, otherwise ``right``."""
    return left if left.less_than(right) else right


def main(argv=None) -> None:
    cit1 = Citation("Shapiro", 2011)
    cit2 = Citation("Baumann", 2010)
    cit3 = Citation("Baumann", 2019)
    print(f"min({cit1}, {cit2}) = {lesser(cit1, cit2)}")
    print(f"min({cit2}, {cit3}) = {lesser(cit2, cit3)}")
    print(f"min({cit1}, {cit3}) = {lesser(cit1, cit3)}")


if __name__ == "__main__":
    main()