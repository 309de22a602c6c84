"""Rounding engine: fixed-point rendering with nearest/floor/ceil modes.

Usage:
    from bpmath.rounding import ceil, fixed, floor

    fixed("1.005", 2)         # "1.01"
    floor("1.239", 2)         # "1.23"
    ceil("1.231", 2)          # "1.24"
    fixed("1.5", 3, True)     # "1.500"
"""

from __future__ import annotations

import re
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, Decimal
from enum import Enum

from bpmath.context import DEFAULT_MATH_CONFIG, MathConfig
from bpmath.types import LiveRef, NumericLike, split_decimal, to_decimal, unwrap

_ALL_ZERO_FRACTION = re.compile(r"^\.0*$")
_TRAILING_ZEROS = re.compile(r"(\.\d*[1-9])0+$|\.0*$")


class RoundingMode(str, Enum):
    """How a value is brought to a fixed number of fractional digits."""

    NEAREST = "nearest"  # half-up, ties away from zero
    FLOOR = "floor"  # toward negative infinity
    CEIL = "ceil"  # toward positive infinity

    @property
    def decimal_rounding(self) -> str:
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING = {
    RoundingMode.NEAREST: ROUND_HALF_UP,
    RoundingMode.FLOOR: ROUND_FLOOR,
    RoundingMode.CEIL: ROUND_CEILING,
}


def quantize_fixed(
    value: Decimal,
    places: int,
    mode: RoundingMode,
    config: MathConfig = DEFAULT_MATH_CONFIG,
) -> str:
    """Render ``value`` with exactly ``places`` fractional digits.

    Non-finite values render as "0" (zero-filled). A result that rounds to
    zero never carries a minus sign.
    """
    if not value.is_finite():
        value = Decimal(0)
    exponent = Decimal(1).scaleb(-places)
    context = config.quantize_context(value, places)
    result = value.quantize(exponent, rounding=mode.decimal_rounding, context=context)
    if result.is_zero():
        result = result.copy_abs()
    return format(result, "f")


def trim_trailing_zeros(text: str) -> str:
    """Strip insignificant trailing fractional zeros (and a bare dot)."""
    return _TRAILING_ZEROS.sub(r"\1", text)


def round_to(
    value: NumericLike | LiveRef,
    places: int = 0,
    fill_zero: bool = False,
    mode: RoundingMode = RoundingMode.NEAREST,
) -> str:
    """Round a numeric-like value to ``places`` fractional digits.

    Args:
        value: Number, decimal string, Decimal or live reference.
            Invalid input is treated as "0".
        places: Fractional digits to keep (must be >= 0)
        fill_zero: Keep exactly ``places`` digits, padding with zeros
        mode: Rounding direction

    Returns:
        Fixed-notation decimal string, never in exponent form
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    result = quantize_fixed(to_decimal(unwrap(value)), places, RoundingMode(mode))
    if fill_zero:
        return result

    integer_part, fractional_part = split_decimal(result)
    if not fractional_part or _ALL_ZERO_FRACTION.match(fractional_part):
        return integer_part
    return integer_part + fractional_part.rstrip("0")


def fixed(value: NumericLike | LiveRef, places: int = 0, fill_zero: bool = False) -> str:
    """Round half-up to ``places`` fractional digits."""
    return round_to(value, places, fill_zero, RoundingMode.NEAREST)


def floor(value: NumericLike | LiveRef, places: int = 0, fill_zero: bool = False) -> str:
    """Round toward negative infinity at ``places`` fractional digits."""
    return round_to(value, places, fill_zero, RoundingMode.FLOOR)


def ceil(value: NumericLike | LiveRef, places: int = 0, fill_zero: bool = False) -> str:
    """Round toward positive infinity at ``places`` fractional digits."""
    return round_to(value, places, fill_zero, RoundingMode.CEIL)


__all__ = [
    "RoundingMode",
    "ceil",
    "fixed",
    "floor",
    "quantize_fixed",
    "round_to",
    "trim_trailing_zeros",
]
