import pytest

from drills.protobuf import (
    Field,
    FieldValue,
    Person,
    PhoneNumber,
    ProtobufError,
    WireType,
    parse_field,
    parse_message,
    parse_varint,
    unpack_tag,
)


def _varint(number):
    out = bytearray()
    while True:
        low = number & 0x7F
        number >>= 7
        if number:
            out.append(low | 0x80)
        else:
            out.append(low)
            return bytes(out)


def _varint_field(num, value):
    return _varint(num << 3) + _varint(value)


def _len_field(num, payload):
    return _varint((num << 3) | 2) + _varint(len(payload)) + payload


EXAMPLE = bytes.fromhex(
    "0a076d617877656c6c102a1a160a0e2b313230322d3535352d31323132"
    "1204686f6d651a180a0e2b313830302d3836372d353330381206"
    "6d6f62696c65"
)


def test_as_string():
    with pytest.raises(ProtobufError):
        FieldValue(WireType.VARINT, 10).as_string()
    with pytest.raises(ProtobufError):
        FieldValue(WireType.I32, 10).as_string()
    assert FieldValue(WireType.LEN, b"hello").as_string() == "hello"


def test_as_bytes():
    with pytest.raises(ProtobufError):
        FieldValue(WireType.VARINT, 10).as_bytes()
    with pytest.raises(ProtobufError):
        FieldValue(WireType.I32, 10).as_bytes()
    assert FieldValue(WireType.LEN, b"hello").as_bytes() == b"hello"


def test_as_u64():
    assert FieldValue(WireType.VARINT, 10).as_u64() == 10
    with pytest.raises(ProtobufError):
        FieldValue(WireType.I32, 10).as_u64()
    with pytest.raises(ProtobufError):
        FieldValue(WireType.LEN, b"hello").as_u64()


def test_invalid_utf8_string():
    with pytest.raises(ProtobufError, match="UTF-8"):
        FieldValue(WireType.LEN, b"\xff\xfe").as_string()


def test_parse_varint_two_bytes():
    assert parse_varint(b"\xac\x02rest") == (300, b"rest")


@pytest.mark.parametrize("number", [0, 1, 127, 128, 16383, 2**40])
def test_varint_round_trip(number):
    assert parse_varint(_varint(number) + b"x") == (number, b"x")


@pytest.mark.parametrize("data", [b"", b"\x80", b"\xff" * 8])
def test_parse_varint_invalid(data):
    with pytest.raises(ProtobufError, match="Invalid varint"):
        parse_varint(data)


def test_unpack_tag():
    assert unpack_tag((3 << 3) | 2) == (3, WireType.LEN)


def test_unpack_tag_rejects_unknown_wire_type():
    with pytest.raises(ProtobufError, match="wire-type"):
        unpack_tag((1 << 3) | 1)


def test_parse_i32_field():
    data = bytes([(1 << 3) | 5]) + (-2).to_bytes(4, "little", signed=True) + b"z"
    field, remainder = parse_field(data)
    assert field == Field(1, FieldValue(WireType.I32, -2))
    assert remainder == b"z"


def test_parse_truncated_i32():
    with pytest.raises(ProtobufError, match="EOF"):
        parse_field(bytes([(1 << 3) | 5, 1, 2]))


def test_parse_truncated_len():
    with pytest.raises(ProtobufError, match="EOF"):
        parse_field(bytes([(1 << 3) | 2, 5]) + b"ab")


def test_parse_example_person():
    person = parse_message(EXAMPLE, Person)
    assert person.name == "maxwell"
    assert person.id == 42
    assert [phone.type_ for phone in person.phone] == ["home", "mobile"]
    assert all(phone.number.startswith("+1") for phone in person.phone)


def test_person_round_trip_and_skips_unknown_fields():
    phone = _len_field(1, b"ext-100") + _len_field(2, b"work")
    data = (
        _len_field(1, b"alice")
        + _varint_field(2, 7)
        + _varint_field(9, 1)
        + _len_field(3, phone)
    )
    person = parse_message(data, Person)
    assert person == Person("alice", 7, [PhoneNumber("ext-100", "work")])


def test_person_rejects_wrong_wire_type_for_name():
    with pytest.raises(ProtobufError, match="Unexpected wire-type"):
        parse_message(_varint_field(1, 5), Person)


def test_empty_message_is_default():
    assert parse_message(b"", Person) == Person()