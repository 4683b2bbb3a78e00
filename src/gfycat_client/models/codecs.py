"""Field codecs for the non-standard encodings used by the Gfycat API.

The provider deviates from plain JSON in a few places:

- large integers (``gfyNumber``) are sent as decimal strings, not numbers;
- the ``nsfw`` enumeration is sent as a *string-wrapped* integer code
  (``"0"``), while ``published`` is a bare JSON integer (``1``);
- timestamps are seconds since the Unix epoch.

Each codec is a plain ``encode``/``decode`` pair that can be used on its own,
plus a pydantic ``Annotated`` type that plugs the pair into a model field.
Decode failures raise :class:`~gfycat_client.core.exceptions.CodecError`,
which pydantic surfaces as a ``ValidationError``.

Example::

    class Record(BaseModel):
        number: StringifiedU64
        when: EpochSeconds
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from enum import IntEnum
from typing import Annotated, Any, Generic, TypeVar

from pydantic import PlainSerializer, PlainValidator

from gfycat_client.core.exceptions import CodecError

E = TypeVar("E", bound=IntEnum)

U32_MAX: int = 2**32 - 1
U64_MAX: int = 2**64 - 1

# ASCII digits only; int() alone would also accept whitespace, underscores
# and non-ASCII digits.
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Integer as string
# ---------------------------------------------------------------------------


def encode_int_as_str(value: int) -> str:
    """Encode an integer as its decimal string representation."""
    return str(int(value))


def decode_int_from_str(
    value: Any,
    *,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """Decode a decimal string into an integer.

    Args:
        value: The wire value.  Must be a ``str``; bare numbers are rejected.
        min_value: Inclusive lower bound of the target integer type.
        max_value: Inclusive upper bound of the target integer type.

    Returns:
        The parsed integer.

    Raises:
        CodecError: If ``value`` is not a string, is not a decimal integer,
            carries a minus sign for an unsigned target (``min_value >= 0``),
            or falls outside ``[min_value, max_value]``.
    """
    if not isinstance(value, str):
        raise CodecError(
            f"expected a stringified integer, got {type(value).__name__}"
        )
    if not _DECIMAL_RE.fullmatch(value):
        raise CodecError(f"invalid digit found in string: {value!r}")
    # Unsigned targets take no sign other than "+", so "-0" is rejected too.
    if min_value is not None and min_value >= 0 and value.startswith("-"):
        raise CodecError(f"invalid digit found in string: {value!r}")
    number = int(value)
    if min_value is not None and number < min_value:
        raise CodecError(f"number too small to fit in target type: {value}")
    if max_value is not None and number > max_value:
        raise CodecError(f"number too large to fit in target type: {value}")
    return number


def stringified_int(min_value: int | None = None, max_value: int | None = None) -> Any:
    """Build an ``Annotated`` integer type transmitted as a JSON string.

    The bounds describe the target integer type (e.g. ``0`` and
    ``U64_MAX`` for an unsigned 64-bit integer).
    """

    def _decode(value: Any) -> int:
        return decode_int_from_str(value, min_value=min_value, max_value=max_value)

    return Annotated[
        int,
        PlainValidator(_decode),
        PlainSerializer(encode_int_as_str, return_type=str),
    ]


StringifiedU64 = stringified_int(0, U64_MAX)
"""Unsigned 64-bit integer transmitted as a decimal string."""


# ---------------------------------------------------------------------------
# Integer-coded enumerations
# ---------------------------------------------------------------------------


class IntEnumCodec(Generic[E]):
    """Codec for an ``IntEnum`` transmitted as a bare JSON integer.

    Holds an explicit bidirectional table between discriminants and members.
    Only the members declared on the enum are accepted; gaps in the numbering
    stay gaps.

    Args:
        enum_cls: The ``IntEnum`` subclass to encode and decode.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self._by_code: dict[int, E] = {int(member): member for member in enum_cls}
        self._by_member: dict[E, int] = {member: code for code, member in self._by_code.items()}

    def to_code(self, member: E) -> int:
        """Return the discriminant of ``member``."""
        try:
            return self._by_member[member]
        except KeyError:
            raise CodecError(f"{member!r} is not a {self.enum_cls.__name__} member") from None

    def from_code(self, code: int) -> E:
        """Return the member whose discriminant is ``code``."""
        try:
            return self._by_code[code]
        except KeyError:
            valid = ", ".join(str(c) for c in sorted(self._by_code))
            raise CodecError(
                f"{code} is not a valid {self.enum_cls.__name__} code (expected one of {valid})"
            ) from None

    def encode(self, member: E) -> Any:
        return self.to_code(member)

    def decode(self, value: Any) -> E:
        if isinstance(value, self.enum_cls):
            return value
        # bool is an int subclass but never a valid code.
        if isinstance(value, bool) or not isinstance(value, int):
            raise CodecError(
                f"expected an integer {self.enum_cls.__name__} code, got {type(value).__name__}"
            )
        return self.from_code(value)

    def annotated(self) -> Any:
        """Return an ``Annotated`` type applying this codec to a model field."""
        return Annotated[
            self.enum_cls,
            PlainValidator(self.decode),
            PlainSerializer(self.encode, return_type=int),
        ]


class StringifiedIntEnumCodec(IntEnumCodec[E]):
    """Codec for an ``IntEnum`` transmitted as a string-wrapped integer.

    ``ContentSafety.ADULT`` travels as ``"1"``: the discriminant is rendered
    in decimal and sent as a JSON string.  Decoding parses the string as an
    unsigned integer before the table lookup; a bare JSON integer is
    rejected.
    """

    def encode(self, member: E) -> str:
        return encode_int_as_str(self.to_code(member))

    def decode(self, value: Any) -> E:
        if isinstance(value, self.enum_cls):
            return value
        return self.from_code(decode_int_from_str(value, min_value=0))

    def annotated(self) -> Any:
        return Annotated[
            self.enum_cls,
            PlainValidator(self.decode),
            PlainSerializer(self.encode, return_type=str),
        ]


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------


def decode_epoch_seconds(value: Any) -> datetime:
    """Decode seconds since the Unix epoch into an aware UTC ``datetime``.

    Raises:
        CodecError: If ``value`` is not a JSON number or is out of range.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise CodecError("naive datetime; a timezone-aware value is required")
        return value.astimezone(timezone.utc)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CodecError(f"expected seconds since the epoch, got {type(value).__name__}")
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise CodecError(f"timestamp out of range: {value}") from exc


def encode_epoch_seconds(value: datetime) -> int:
    """Encode an aware ``datetime`` as whole seconds since the Unix epoch."""
    return int(value.timestamp())


EpochSeconds = Annotated[
    datetime,
    PlainValidator(decode_epoch_seconds),
    PlainSerializer(encode_epoch_seconds, return_type=int),
]
"""UTC timestamp transmitted as seconds since the Unix epoch."""
