"""Listing the entries of a directory, including "." and ".."."""

from __future__ import annotations

import os
import sys
from itertools import chain
from pprint import pformat
from typing import Iterator, Union

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


class DirectoryError(OSError):
    """Raised when a directory cannot be opened."""


class DirectoryIterator:
    """Iterates over the names in a directory, "." and ".." first.

    The directory stays open until the iterator is closed; it can be used
    as a context manager.
    """

    def __init__(self, path: PathArg) -> None:
        raw = os.fspath(path)
        nul = b"\0" if isinstance(raw, bytes) else "\0"
        if nul in raw:
            raise DirectoryError(f"Invalid path: {raw!r} contains a NUL byte")
        self.path = raw
        try:
            self._scan = os.scandir(raw)
        except OSError as error:
            raise DirectoryError(f"Could not open {raw!r}") from error
        dots = (b".", b"..") if isinstance(raw, bytes) else (".", "..")
        self._names: Iterator[Union[str, bytes]] = chain(
            dots, (entry.name for entry in self._scan)
        )

    def __iter__(self) -> "DirectoryIterator":
        return self

    def __next__(self) -> Union[str, bytes]:
        return next(self._names)

    def close(self) -> None:
        """Release the open directory handle."""
        self._scan.close()

    def __enter__(self) -> "DirectoryIterator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "."
    try:
        with DirectoryIterator(path) as entries:
            names = list(entries)
    except DirectoryError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"files: {pformat(names)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())