import io
import string

from drills.rot import RotDecoder, rotate


def test_joke():
    rot = RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13)
    assert rot.read().decode("ascii") == "To get to the other side!"


def test_joke_from_bytes_through_text_wrapper():
    rot = RotDecoder(b"Gb trg gb gur bgure fvqr!", 13)
    with io.TextIOWrapper(io.BufferedReader(rot), encoding="ascii") as text:
        assert text.read() == "To get to the other side!"


def test_binary():
    data = bytes(range(256))
    rot = RotDecoder(io.BytesIO(data), 13)
    buf = bytearray(256)
    assert rot.readinto(buf) == 256
    for before, after in zip(data, buf):
        if before != after:
            assert chr(before) in string.ascii_letters
            assert chr(after) in string.ascii_letters


def test_readinto_at_end_returns_zero():
    rot = RotDecoder(io.BytesIO(b""), 13)
    assert rot.readinto(bytearray(8)) == 0


def test_rotate_round_trip():
    data = bytes(range(256))
    assert rotate(rotate(data, 13), 13) == data
    assert rotate(rotate(data, 3), 23) == data


def test_rotate_matches_decoder():
    data = b"Gb trg gb gur bgure fvqr!"
    assert rotate(data, 13) == RotDecoder(data, 13).read()