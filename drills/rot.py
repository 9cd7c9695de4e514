"""A binary reader that applies a rotation cipher to ASCII letters."""

from __future__ import annotations

import io
import string
from typing import BinaryIO, Union


def _table(rot: int) -> bytes:
    table = bytearray(range(256))
    for alphabet in (string.ascii_uppercase, string.ascii_lowercase):
        base = ord(alphabet[0])
        for offset in range(26):
            table[base + offset] = base + (offset + rot) % 26
    return bytes(table)


def rotate(data: bytes, rot: int) -> bytes:
    """Rotate each ASCII letter in ``data`` by ``rot`` places."""
    return bytes(data).translate(_table(rot))


class RotDecoder(io.RawIOBase):
    """Reads from an underlying binary stream, rotating ASCII letters."""

    def __init__(self, source: Union[BinaryIO, bytes, bytearray], rot: int) -> None:
        super().__init__()
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._input = source
        self._table = _table(rot)

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int | None:
        view = memoryview(buffer).cast("B")
        data = self._input.read(len(view))
        if data is None:
            return None
        size = len(data)
        view[:size] = bytes(data).translate(self._table)
        return size


def main(argv=None) -> None:
    decoder = RotDecoder(b"Gb trg gb gur bgure fvqr!", 13)
    print(decoder.read().decode("ascii"))


if __name__ == "__main__":
    main()