"""Human-facing formatting helpers.

These produce display strings only; their output is not meant to be parsed
back into numbers.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from bpmath.types import LiveRef, NumericLike, split_decimal

_FIRST_DIGIT_RUN = re.compile(r"\d+")
_THOUSANDS = re.compile(r"(\d)(?=(\d{3})+$)")
_FIRST_NON_ZERO = re.compile(r"[1-9]")

# String leaves that count as "no value"
EMPTY_SENTINELS = frozenset({"0", "undefined", "null", "false"})


def _is_not_number(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    try:
        return math.isnan(float(value))
    except (TypeError, ValueError):
        return True


def to_thousands(value: NumericLike) -> str:
    """Insert thousands separators into the first run of digits.

    >>> to_thousands(1234567)
    '1,234,567'
    >>> to_thousands("1234567.891")
    '1,234,567.891'
    """
    if _is_not_number(value):
        return "0"
    text = format(value, "f") if isinstance(value, Decimal) else str(value)
    return _FIRST_DIGIT_RUN.sub(lambda run: _THOUSANDS.sub(r"\1,", run.group()), text, count=1)


def simple_zero(text: str, start_len: int = 2, lens: int = 4) -> str:
    """Compress a long run of leading fractional zeros.

    Only fractions starting with at least ``start_len`` zeros are rewritten,
    keeping ``lens`` digits after the run:

    >>> simple_zero("3.000123")
    '3.0{3}123'
    >>> simple_zero("3.01")
    '3.01'
    """
    integer_part, fractional_part = split_decimal(text)
    digits = fractional_part[1:]
    match = _FIRST_NON_ZERO.search(digits)
    if match and match.start() >= start_len:
        run = match.start()
        return f"{integer_part}.0{{{run}}}{digits[run:run + lens]}"
    return text


def _has_value(leaf: Any) -> bool:
    if isinstance(leaf, str):
        if leaf in EMPTY_SENTINELS:
            return False
        if leaf.startswith("0x"):
            try:
                return int(leaf, 16) != 0
            except ValueError:
                return False
    if isinstance(leaf, Decimal):
        return not leaf.is_nan() and not leaf.is_zero()
    if isinstance(leaf, float) and math.isnan(leaf):
        return False
    return bool(leaf)


def is_empty(target: Any) -> bool:
    """Return True if ``target`` holds no meaningful value.

    Sequences, sets and mapping values are inspected recursively and live
    references are dereferenced. A structure is non-empty as soon as one leaf
    is truthy and is not a sentinel string ("0", "undefined", "null",
    "false"). NaN counts as no value. Hex strings count only when their value
    is non-zero.
    """
    if isinstance(target, (str, bytes, int, float, Decimal)) or target is None:
        return not _has_value(target)
    if isinstance(target, Mapping):
        return all(is_empty(item) for item in target.values())
    if isinstance(target, (list, tuple, set, frozenset)):
        return all(is_empty(item) for item in target)
    if isinstance(target, LiveRef):
        return is_empty(target.value)
    return not _has_value(target)


__all__ = [
    "EMPTY_SENTINELS",
    "is_empty",
    "simple_zero",
    "to_thousands",
]
