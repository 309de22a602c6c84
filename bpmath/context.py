"""Shared arithmetic context for precision-safe decimal math.

All arithmetic runs inside ``decimal.localcontext(...)`` built from the frozen
``DEFAULT_MATH_CONFIG``, so the caller's thread-local decimal context is never
read or modified.
"""

from __future__ import annotations

import decimal
import os
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

# 64 significant digits: enough headroom for uint256 amounts scaled by 1e18
DEFAULT_PRECISION = int(os.environ.get("BPMATH_PRECISION", "64"))

# Relative tolerance for three-way comparison
DEFAULT_EPSILON = Decimal(os.environ.get("BPMATH_EPSILON", "1e-12"))


@dataclass(frozen=True)
class MathConfig:
    """Immutable configuration for the arbitrary-precision context.

    Attributes:
        precision: Maximum significant digits kept by arithmetic results
        epsilon: Relative tolerance below which two values compare equal
        rounding: Rounding applied when a result exceeds ``precision``
    """

    precision: int = DEFAULT_PRECISION
    epsilon: Decimal = DEFAULT_EPSILON
    rounding: str = ROUND_HALF_UP

    def arithmetic_context(self) -> decimal.Context:
        """Context with every trap disabled.

        Division by zero yields Infinity and 0/0 yields NaN instead of
        raising, so callers can clamp non-finite results.
        """
        return decimal.Context(prec=self.precision, rounding=self.rounding, traps=[])

    def strict_context(self) -> decimal.Context:
        """Context that raises on malformed input, division by zero and overflow."""
        return decimal.Context(
            prec=self.precision,
            rounding=self.rounding,
            traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
        )

    def quantize_context(self, value: Decimal, places: int) -> decimal.Context:
        """Context wide enough to quantize ``value`` to ``places`` digits.

        ``Decimal.quantize`` signals InvalidOperation when the quantized
        coefficient would exceed the context precision.
        """
        digits = max(value.adjusted(), 0) + places + 2
        return decimal.Context(
            prec=max(self.precision, digits),
            rounding=self.rounding,
            traps=[decimal.InvalidOperation],
        )


# Default configuration instance
DEFAULT_MATH_CONFIG = MathConfig()


__all__ = [
    "DEFAULT_EPSILON",
    "DEFAULT_MATH_CONFIG",
    "DEFAULT_PRECISION",
    "MathConfig",
]
