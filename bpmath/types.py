"""Numeric-like input types and their validation.

Inputs accepted by the arithmetic and rounding helpers:
- ``int``: arbitrary-size integer, always valid (zero included)
- ``float``: native number, invalid when zero or NaN
- ``str``: decimal, exponent or ``0x`` hex text, invalid when empty or unparseable
- ``Decimal``: arbitrary-precision number, invalid only when NaN
- a live reference (any object exposing ``value``) wrapping one of the above
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any, NamedTuple, Protocol, Union, runtime_checkable

NumericLike = Union[int, float, str, Decimal]

_PRIMITIVES = (str, int, float, Decimal)


@runtime_checkable
class LiveRef(Protocol):
    """A boxed value that dereferences to its current content."""

    @property
    def value(self) -> Any: ...


class DecimalParts(NamedTuple):
    """A decimal string split at its first dot.

    ``fractional_part`` keeps the leading dot, or is empty when there is none.
    """

    integer_part: str
    fractional_part: str


def unwrap(value: Any) -> Any:
    """Return the current content of a live reference, or ``value`` itself."""
    if value is None or isinstance(value, _PRIMITIVES):
        return value
    if isinstance(value, LiveRef):
        return value.value
    return value


def _parse_text(text: str) -> Decimal:
    """Parse a decimal or ``0x`` hex string; raises on malformed text."""
    stripped = text.strip()
    sign = ""
    if stripped[:1] in ("-", "+"):
        sign, stripped = stripped[0], stripped[1:]
    if stripped[:2].lower() == "0x":
        magnitude = Decimal(int(stripped[2:], 16))
        return -magnitude if sign == "-" else magnitude
    return Decimal(sign + stripped)


def is_invalid(value: Any) -> bool:
    """Return True if ``value`` cannot be used as a number.

    Integers are always valid, including zero. Floats are invalid when zero
    or NaN, strings when empty or not numeric, Decimals only when NaN.
    Booleans, None, containers and other objects are invalid.
    """
    if value is None or isinstance(value, bool):
        return True
    if isinstance(value, int):
        return False
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value) or value == 0
    if isinstance(value, str):
        if not value.strip():
            return True
        try:
            return _parse_text(value).is_nan()
        except (InvalidOperation, ValueError):
            return True
    return True


def to_decimal(value: Any) -> Decimal:
    """Convert a valid numeric-like value to Decimal.

    Floats go through ``str`` so the shortest round-trip repr is used rather
    than the binary expansion. Invalid values become ``Decimal(0)``.
    """
    if is_invalid(value):
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        return _parse_text(value)
    return Decimal(str(value))


def split_decimal(text: str) -> DecimalParts:
    """Split ``text`` into integer and fractional parts at the first dot."""
    index = text.find(".")
    if index < 0:
        return DecimalParts(text, "")
    return DecimalParts(text[:index], text[index:])


__all__ = [
    "DecimalParts",
    "LiveRef",
    "NumericLike",
    "is_invalid",
    "split_decimal",
    "to_decimal",
    "unwrap",
]
