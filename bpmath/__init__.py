"""Precision-safe decimal arithmetic, rounding and display helpers."""

from bpmath.arithmetic import (
    Operation,
    OperationConfig,
    add,
    apply,
    divide,
    format_units,
    multiply,
    subtract,
)
from bpmath.compare import compare, gt, gte, lt, lte
from bpmath.context import DEFAULT_MATH_CONFIG, MathConfig
from bpmath.display import is_empty, simple_zero, to_thousands
from bpmath.rounding import RoundingMode, ceil, fixed, floor, round_to
from bpmath.types import NumericLike, is_invalid, split_decimal

__version__ = "0.1.0"
__all__ = [
    # Arithmetic
    "Operation",
    "OperationConfig",
    "add",
    "apply",
    "divide",
    "format_units",
    "multiply",
    "subtract",
    # Comparison
    "compare",
    "gt",
    "gte",
    "lt",
    "lte",
    # Context
    "DEFAULT_MATH_CONFIG",
    "MathConfig",
    # Display
    "is_empty",
    "simple_zero",
    "to_thousands",
    # Rounding
    "RoundingMode",
    "ceil",
    "fixed",
    "floor",
    "round_to",
    # Types
    "NumericLike",
    "is_invalid",
    "split_decimal",
    "__version__",
]
