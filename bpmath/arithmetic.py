"""Chained arbitrary-precision arithmetic returning display-ready strings.

Every operation reduces its operands left to right in the shared 64-digit
context, then rounds the result to ``|deci|`` fractional digits:

    add(1, 2, 3)                           # "6"
    subtract(10, 2, 3)                     # "5"  ((10 - 2) - 3)
    divide(10, 3, deci=4)                  # "3.3333"
    divide(10, 3, deci=-2)                 # "3.33"  (negative deci floors)
    multiply(3, 2, deci=3, fill_zero=True) # "6.000"
    subtract(1, 2, pos=True)               # "0"
    divide(5, 0)                           # "0"

Operands that are not usable numbers are replaced by zero and never raise.
"""

from __future__ import annotations

import decimal
import math
from collections.abc import Sequence
from decimal import Decimal
from enum import Enum
from typing import Any

import structlog
from pydantic import BaseModel, Field, field_validator

from bpmath.compare import lt
from bpmath.context import DEFAULT_MATH_CONFIG, MathConfig
from bpmath.rounding import RoundingMode, quantize_fixed, trim_trailing_zeros
from bpmath.types import LiveRef, NumericLike, is_invalid, to_decimal, unwrap

logger = structlog.get_logger()


class Operation(str, Enum):
    """Binary operation applied pairwise along the operand chain."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    def __call__(self, left: Decimal, right: Decimal) -> Decimal:
        if self is Operation.ADD:
            return left + right
        if self is Operation.SUBTRACT:
            return left - right
        if self is Operation.MULTIPLY:
            return left * right
        return left / right


class OperationConfig(BaseModel):
    """Per-call result formatting.

    Attributes:
        deci: Fractional digits to keep. Non-negative rounds half-up,
            negative floors. ``-0.0`` floors to an integer.
        fill_zero: Pad the result to exactly ``|deci|`` fractional digits.
        pos: Subtraction only; negative results are clamped to "0".
    """

    model_config = {"populate_by_name": True, "frozen": True}

    deci: float = 0
    fill_zero: bool = Field(default=False, alias="fillZero")
    pos: bool = False

    @field_validator("deci")
    @classmethod
    def _integral_deci(cls, value: float) -> float:
        if not math.isfinite(value) or value != int(value):
            raise ValueError(f"deci must be an integer, got {value}")
        return value

    @property
    def places(self) -> int:
        return abs(int(self.deci))

    @property
    def mode(self) -> RoundingMode:
        # copysign distinguishes -0.0 from 0
        if math.copysign(1.0, self.deci) < 0:
            return RoundingMode.FLOOR
        return RoundingMode.NEAREST


DEFAULT_OPERATION_CONFIG = OperationConfig()


def _operand(item: Any, position: int) -> Decimal:
    value = unwrap(item)
    if is_invalid(value):
        logger.debug(
            "arithmetic_invalid_operand",
            position=position,
            operand_type=type(value).__name__,
        )
        return Decimal(0)
    return to_decimal(value)


def apply(
    operation: Operation | str,
    operands: Sequence[NumericLike | LiveRef],
    config: OperationConfig | None = None,
    math_config: MathConfig = DEFAULT_MATH_CONFIG,
) -> str:
    """Reduce ``operands`` left to right with ``operation``.

    Args:
        operation: Operation or its name ("add", "subtract", "multiply", "divide")
        operands: Numeric-like values, live references allowed
        config: Result formatting; defaults round to an integer.
            ``pos`` clamps negative subtraction results to "0".
        math_config: Arithmetic context configuration

    Returns:
        Decimal string rounded per ``config``. Non-finite results are "0".

    Raises:
        ValueError: If ``operation`` is not a known operation name
    """
    op = Operation(operation)
    config = config or DEFAULT_OPERATION_CONFIG
    values = [_operand(item, position) for position, item in enumerate(operands)]
    if not values:
        return "0"

    with decimal.localcontext(math_config.arithmetic_context()):
        result = values[0]
        for value in values[1:]:
            result = op(result, value)

    if not result.is_finite():
        logger.debug(
            "arithmetic_non_finite_result",
            operation=op.value,
            operand_count=len(values),
            result=str(result),
        )
        result = Decimal(0)

    text = quantize_fixed(result, config.places, config.mode, math_config)
    if not config.fill_zero:
        text = trim_trailing_zeros(text)
    if op is Operation.SUBTRACT and config.pos and lt(text, "0"):
        return "0"
    return text


def add(*operands: NumericLike | LiveRef, deci: float = 0, fill_zero: bool = False) -> str:
    """Sum of ``operands``."""
    return apply(Operation.ADD, operands, OperationConfig(deci=deci, fill_zero=fill_zero))


def subtract(
    *operands: NumericLike | LiveRef,
    deci: float = 0,
    fill_zero: bool = False,
    pos: bool = False,
) -> str:
    """First operand minus each following operand, in order.

    With ``pos=True`` a negative result is clamped to "0".
    """
    config = OperationConfig(deci=deci, fill_zero=fill_zero, pos=pos)
    return apply(Operation.SUBTRACT, operands, config)


def multiply(*operands: NumericLike | LiveRef, deci: float = 0, fill_zero: bool = False) -> str:
    """Product of ``operands``."""
    return apply(Operation.MULTIPLY, operands, OperationConfig(deci=deci, fill_zero=fill_zero))


def divide(*operands: NumericLike | LiveRef, deci: float = 0, fill_zero: bool = False) -> str:
    """First operand divided by each following operand, in order.

    Division by zero yields "0".
    """
    return apply(Operation.DIVIDE, operands, OperationConfig(deci=deci, fill_zero=fill_zero))


def format_units(value: NumericLike | LiveRef, digits: int = 0, decimals: int = 18) -> str:
    """Convert an on-chain integer amount into a decimal string.

    Args:
        value: Amount in base units (int, decimal string or ``0x`` hex string)
        digits: Fractional digits to keep. Negative floors instead of rounding.
        decimals: Token decimals (18 for ETH/wei)

    Returns:
        Zero-filled decimal string, e.g. ``format_units(1234500000000000000, 2) == "1.23"``
    """
    places = abs(digits)
    mode = RoundingMode.FLOOR if digits < 0 else RoundingMode.NEAREST
    value = unwrap(value)
    if is_invalid(value):
        return quantize_fixed(Decimal(0), places, mode)

    with decimal.localcontext(DEFAULT_MATH_CONFIG.arithmetic_context()):
        scaled = to_decimal(value).scaleb(-decimals)
    return quantize_fixed(scaled, places, mode)


__all__ = [
    "DEFAULT_OPERATION_CONFIG",
    "Operation",
    "OperationConfig",
    "add",
    "apply",
    "divide",
    "format_units",
    "multiply",
    "subtract",
]
