"""NMEA field parsing utilities and typed field accessors.

NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). Reading an empty field through a typed accessor raises
FieldNotAvailableError, so callers always distinguish "no data" from "zero
value".

Sentence definitions declare their layout with the descriptors defined here:

    class RMBSentence(Sentence):
        sentence_type = SentenceType.RMB

        steer_to = EnumField(2, Direction)
        bearing = FloatField(10, minimum=0.0, maximum=360.0)
        destination = WaypointField(4)

Each descriptor is bound to a fixed index (or, for composite values, a fixed
run of consecutive indices). Getters parse the current tokens, setters
validate and format the new value before writing anything, and ``del``
clears the field back to empty.
"""

import math
import re
import sys
from collections.abc import Iterable, Sequence
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any

from marinenmea.nmea.coordinates import (
    decode_position,
    decode_waypoint,
    encode_position,
    encode_waypoint,
)
from marinenmea.nmea.errors import (
    FieldNotAvailableError,
    FormatError,
    InvalidArgumentError,
    RangeError,
)
from marinenmea.nmea.types import Position, Waypoint

if TYPE_CHECKING:
    from marinenmea.nmea.sentence import Sentence

_DECIMAL_PATTERN = re.compile(r"[-+]?(\d+(\.\d*)?|\.\d+)")
_INTEGER_PATTERN = re.compile(r"[-+]?\d+")

# Printable ASCII minus the characters NMEA 0183 reserves for framing.
_STRING_PATTERN = re.compile(r"[\x20-\x7E]*")
_RESERVED_CHARACTERS = frozenset("$!*,\\^~")


def parse_string_field(value: str, index: int) -> str:
    """Return a string field unchanged, raising if it is empty.

    Args:
        value: String value from an NMEA field
        index: Position of the field, reported in the error

    Returns:
        The token unchanged

    Raises:
        FieldNotAvailableError: If the field is empty
    """
    if not value:
        raise FieldNotAvailableError(index)
    return value


def parse_float_field(value: str, index: int) -> float:
    """Parse a decimal number field.

    Only plain decimal notation is accepted ("432.3", "-0.123", ".5"); Python
    spellings such as "nan", "1e3" or "1_0" are rejected.

    Args:
        value: String value from an NMEA field
        index: Position of the field, reported in errors

    Returns:
        Parsed float value

    Raises:
        FieldNotAvailableError: If the field is empty
        FormatError: If the field is not a decimal number

    Example:
        >>> parse_float_field("234.9", 10)
        234.9
    """
    parse_string_field(value, index)
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise FormatError(f"Field {index} is not a number: {value!r}")
    return float(value)


def parse_int_field(value: str, index: int) -> int:
    """Parse an integer field such as satellite count or fix quality.

    Raises:
        FieldNotAvailableError: If the field is empty
        FormatError: If the field is not an integer
    """
    parse_string_field(value, index)
    if not _INTEGER_PATTERN.fullmatch(value):
        raise FormatError(f"Field {index} is not an integer: {value!r}")
    return int(value)


def format_decimal(value: float, min_decimals: int = 1) -> str:
    """Format a number in plain decimal notation.

    The shortest representation that round-trips the float is used, so the
    precision supplied by the caller is kept as-is. At least ``min_decimals``
    fraction digits are always written and exponent notation never is.
    Integers are written digit for digit.

    Example:
        >>> format_decimal(180)
        '180.0'
        >>> format_decimal(1.111)
        '1.111'
        >>> format_decimal(0.00001)
        '0.00001'

    Raises:
        InvalidArgumentError: If the value is not finite, or is an integer too
            large to be read back as a float
    """
    if isinstance(value, int):
        if abs(value) > sys.float_info.max:
            raise InvalidArgumentError(
                f"Integer of {value.bit_length()} bits does not fit a decimal field"
            )
        text = str(value)
    else:
        if not math.isfinite(value):
            raise InvalidArgumentError(f"Cannot format non-finite value {value!r}")
        text = format(Decimal(repr(value)), "f")
    whole, _, fraction = text.partition(".")
    fraction = fraction.ljust(min_decimals, "0")
    if not fraction:
        return whole
    return f"{whole}.{fraction}"


def _describe_choices(names: Sequence[str]) -> str:
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} or {names[-1]}"


def _describe_number(value: float) -> str:
    if isinstance(value, int) and abs(value) > sys.float_info.max:
        sign = "-" if value < 0 else ""
        return f"{sign}<{value.bit_length()}-bit integer>"
    return repr(value)


def _check_number(value: Any, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{label} must be a number, got {value!r}")
    # ints are always finite
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidArgumentError(f"{label} must be finite, got {value!r}")


def _check_string(value: Any, label: str) -> None:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{label} must be a str, got {value!r}")
    if not _STRING_PATTERN.fullmatch(value) or _RESERVED_CHARACTERS & set(value):
        raise InvalidArgumentError(
            f"{label} contains reserved or non-printable characters: {value!r}"
        )


class Field:
    """Base descriptor for a run of ``width`` consecutive fields at ``index``."""

    width = 1

    def __init__(self, index: int, doc: str | None = None) -> None:
        self.index = index
        self.name = f"field {index}"
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: "Sentence | None", owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self.decode(instance._read_fields(self.index, self.width))

    def __set__(self, instance: "Sentence", value: Any) -> None:
        # Encode fully before writing so a failed set leaves no trace.
        tokens = self.encode(value)
        instance._write_fields(self.index, tokens)

    def __delete__(self, instance: "Sentence") -> None:
        instance._write_fields(self.index, [""] * self.width)

    def decode(self, tokens: Sequence[str]) -> Any:
        raise NotImplementedError

    def encode(self, value: Any) -> list[str]:
        raise NotImplementedError


class StringField(Field):
    """Raw string field, e.g. a waypoint ID or UTC time."""

    def decode(self, tokens: Sequence[str]) -> str:
        return parse_string_field(tokens[0], self.index)

    def encode(self, value: Any) -> list[str]:
        _check_string(value, self.name)
        return [value]


class FloatField(Field):
    """Decimal number field, optionally restricted to an inclusive interval."""

    def __init__(
        self,
        index: int,
        minimum: float | None = None,
        maximum: float | None = None,
        doc: str | None = None,
    ) -> None:
        super().__init__(index, doc)
        self.minimum = minimum
        self.maximum = maximum

    def _bounds(self) -> str:
        if self.minimum is not None and self.maximum is not None:
            return f"{self.minimum:g}..{self.maximum:g}"
        if self.minimum is not None:
            return f">= {self.minimum:g}"
        return f"<= {self.maximum:g}"

    def _check_range(self, value: float) -> None:
        below = self.minimum is not None and value < self.minimum
        above = self.maximum is not None and value > self.maximum
        if below or above:
            raise RangeError(
                f"{self.name} {_describe_number(value)} out of bounds {self._bounds()}"
            )

    def decode(self, tokens: Sequence[str]) -> float:
        return parse_float_field(tokens[0], self.index)

    def encode(self, value: Any) -> list[str]:
        _check_number(value, self.name)
        self._check_range(value)
        return [format_decimal(value)]


class IntField(Field):
    """Integer field, zero-padded to ``width_digits`` when written."""

    def __init__(
        self,
        index: int,
        width_digits: int | None = None,
        doc: str | None = None,
    ) -> None:
        super().__init__(index, doc)
        self.width_digits = width_digits

    def decode(self, tokens: Sequence[str]) -> int:
        return parse_int_field(tokens[0], self.index)

    def encode(self, value: Any) -> list[str]:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"{self.name} must be an int, got {value!r}")
        if self.width_digits is None:
            return [str(value)]
        return [f"{value:0{self.width_digits}d}"]


class EnumField(Field):
    """Single-character (or single-digit) field mapped to enum members.

    ``allowed`` narrows the accepted members, e.g. a latitude hemisphere only
    takes NORTH or SOUTH out of the four compass points.
    """

    def __init__(
        self,
        index: int,
        enum_type: type[Enum],
        allowed: Iterable[Enum] | None = None,
        doc: str | None = None,
    ) -> None:
        super().__init__(index, doc)
        self.enum_type = enum_type
        self.allowed = tuple(enum_type if allowed is None else allowed)
        self._by_token = {str(member.value): member for member in self.allowed}

    def decode(self, tokens: Sequence[str]) -> Enum:
        token = parse_string_field(tokens[0], self.index)
        try:
            return self._by_token[token]
        except KeyError:
            raise FormatError(
                f"Field {self.index} is not a valid "
                f"{self.enum_type.__name__}: {token!r}"
            ) from None

    def encode(self, value: Any) -> list[str]:
        if not isinstance(value, self.enum_type) or value not in self.allowed:
            choices = _describe_choices([member.name for member in self.allowed])
            raise InvalidArgumentError(
                f"{self.name} must be {choices}, got {value!r}"
            )
        return [str(value.value)]


class PositionField(Field):
    """Latitude, N/S, longitude, E/W spread over four consecutive fields."""

    width = 4

    def decode(self, tokens: Sequence[str]) -> Position:
        return decode_position(tokens, self.index)

    def encode(self, value: Any) -> list[str]:
        if not isinstance(value, Position):
            raise InvalidArgumentError(
                f"{self.name} must be a Position, got {value!r}"
            )
        return encode_position(value)


class WaypointField(Field):
    """Waypoint ID followed by a position, over five consecutive fields."""

    width = 5

    def decode(self, tokens: Sequence[str]) -> Waypoint:
        return decode_waypoint(tokens, self.index)

    def encode(self, value: Any) -> list[str]:
        if not isinstance(value, Waypoint):
            raise InvalidArgumentError(
                f"{self.name} must be a Waypoint, got {value!r}"
            )
        _check_string(value.id, f"{self.name} id")
        return encode_waypoint(value)
