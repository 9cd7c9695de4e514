"""A minimal decoder for the protobuf wire format."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol, TypeVar, Union


class ProtobufError(ValueError):
    """Raised when protobuf data cannot be decoded."""


class WireType(enum.Enum):
    """A wire type as seen on the wire."""

    # A single varint.
    VARINT = 0
    # A varint length followed by exactly that many bytes.
    LEN = 2
    # Exactly 4 bytes holding a little-endian signed 32-bit integer.
    I32 = 5

    @classmethod
    def from_value(cls, value: int) -> "WireType":
        try:
            return cls(value)
        except ValueError:
            raise ProtobufError("Invalid wire-type") from None


@dataclass(frozen=True)
class FieldValue:
    """A field's value, typed by its wire type."""

    wire_type: WireType
    value: Union[int, bytes]

    def as_bytes(self) -> bytes:
        if self.wire_type is not WireType.LEN:
            raise ProtobufError("Unexpected wire-type")
        return bytes(self.value)

    def as_string(self) -> str:
        data = self.as_bytes()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as error:
            raise ProtobufError("Invalid string (not UTF-8)") from error

    def as_u64(self) -> int:
        if self.wire_type is not WireType.VARINT:
            raise ProtobufError("Unexpected wire-type")
        return int(self.value)


@dataclass(frozen=True)
class Field:
    """A field number together with its value."""

    field_num: int
    value: FieldValue


class ProtoMessage(Protocol):
    def add_field(self, field: Field) -> None:
        """Take in one decoded field."""


M = TypeVar("M", bound=ProtoMessage)

_MAX_VARINT_BYTES = 7


def parse_varint(data: bytes) -> tuple[int, bytes]:
    """Parse a varint, returning its value and the remaining bytes."""
    data = bytes(data)
    for index, byte in enumerate(data[:_MAX_VARINT_BYTES]):
        if not byte & 0x80:
            value = 0
            for part in reversed(data[: index + 1]):
                value = (value << 7) | (part & 0x7F)
            return value, data[index + 1 :]
    raise ProtobufError("Invalid varint")


def unpack_tag(tag: int) -> tuple[int, WireType]:
    """Split a tag into a field number and a wire type."""
    return tag >> 3, WireType.from_value(tag & 0x7)


def parse_field(data: bytes) -> tuple[Field, bytes]:
    """Parse one field, returning it and the remaining bytes."""
    tag, remainder = parse_varint(data)
    field_num, wire_type = unpack_tag(tag)
    if wire_type is WireType.VARINT:
        value, remainder = parse_varint(remainder)
        field_value = FieldValue(WireType.VARINT, value)
    elif wire_type is WireType.LEN:
        length, remainder = parse_varint(remainder)
        if len(remainder) < length:
            raise ProtobufError("Unexpected EOF")
        field_value = FieldValue(WireType.LEN, remainder[:length])
        remainder = remainder[length:]
    else:
        if len(remainder) < 4:
            raise ProtobufError("Unexpected EOF")
        number = int.from_bytes(remainder[:4], "little", signed=True)
        field_value = FieldValue(WireType.I32, number)
        remainder = remainder[4:]
    return Field(field_num, field_value), remainder


def parse_message(data: bytes, message_type: type[M]) -> M:
    """Parse all of ``data`` into a new ``message_type`` instance."""
    result = message_type()
    data = bytes(data)
    while data:
        parsed, data = parse_field(data)
        result.add_field(parsed)
    return result


@dataclass
class PhoneNumber:
    number: str = ""
    type_: str = ""

    def add_field(self, field: Field) -> None:
        if field.field_num == 1:
            self.number = field.value.as_string()
        elif field.field_num == 2:
            self.type_ = field.value.as_string()


@dataclass
class Person:
    name: str = ""
    id: int = 0
    phone: list[PhoneNumber] = field(default_factory=list)

    def add_field(self, field: Field) -> None:
        if field.field_num == 1:
            self.name = field.value.as_string()
        elif field.field_num == 2:
            self.id = field.value.as_u64()
        elif field.field_num == 3:
            self.phone.append(parse_message(field.value.as_bytes(), PhoneNumber))


_EXAMPLE = bytes(
    [
        0x0A, 0x07, 0x6D, 0x61, 0x78, 0x77, 0x65, 0x6C, 0x6C, 0x10, 0x2A, 0x1A,
        0x16, 0x0A, 0x0E, 0x2B, 0x31, 0x32, 0x30, 0x32, 0x2D, 0x35, 0x35, 0x35,
        0x2D, 0x31, 0x32, 0x31, 0x32, 0x12, 0x04, 0x68, 0x6F, 0x6D, 0x65, 0x1A,
        0x18, 0x0A, 0x0E, 0x2B, 0x31, 0x38, 0x30, 0x30, 0x2D, 0x38, 0x36, 0x37,
        0x2D, 0x35, 0x33, 0x30, 0x38, 0x12, 0x06, 0x6D, 0x6F, 0x62, 0x69, 0x6C,
        0x65,
    ]
)


def main(argv=None) -> None:
    person = parse_message(_EXAMPLE, Person)
    print(person)


if __name__ == "__main__":
    main()