"""Ordering predicates over numeric-like values.

Unlike the arithmetic helpers, comparisons do not substitute zero for bad
input: both operands are stringified and parsed strictly, so malformed
values raise ``decimal.InvalidOperation``.

Two values compare equal when their difference is within the configured
relative epsilon: ``|a - b| <= max(|a|, |b|) * epsilon``.
"""

from __future__ import annotations

import decimal
from decimal import Decimal
from typing import Any

from bpmath.context import DEFAULT_MATH_CONFIG, MathConfig
from bpmath.types import NumericLike


def _parse(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compare(a: NumericLike, b: NumericLike, config: MathConfig = DEFAULT_MATH_CONFIG) -> int:
    """Three-way compare: -1 if a < b, 0 if nearly equal, 1 if a > b.

    Raises:
        decimal.InvalidOperation: If either operand is not a decimal number
    """
    with decimal.localcontext(config.strict_context()):
        left, right = _parse(a), _parse(b)
        if left.is_nan() or right.is_nan():
            raise decimal.InvalidOperation(f"Cannot compare {a!r} with {b!r}")
        if left == right:
            return 0
        if left.is_finite() and right.is_finite():
            diff = abs(left - right)
            if diff <= max(abs(left), abs(right)) * config.epsilon:
                return 0
        return -1 if left < right else 1


def lt(a: NumericLike, b: NumericLike) -> bool:
    """a < b."""
    return compare(a, b) == -1


def lte(a: NumericLike, b: NumericLike) -> bool:
    """a <= b."""
    return compare(a, b) <= 0


def gt(a: NumericLike, b: NumericLike) -> bool:
    """a > b."""
    return compare(a, b) == 1


def gte(a: NumericLike, b: NumericLike) -> bool:
    """a >= b."""
    return compare(a, b) >= 0


__all__ = [
    "compare",
    "gt",
    "gte",
    "lt",
    "lte",
]
