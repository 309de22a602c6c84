"""Tests for input validation and decimal splitting."""

from decimal import Decimal

import pytest

from bpmath.types import DecimalParts, is_invalid, split_decimal, to_decimal, unwrap


class TestIsInvalid:
    """Tests for the validity predicate."""

    @pytest.mark.parametrize(
        "value",
        [None, "", "   ", "abc", "nan", 0.0, float("nan"), True, False, {}, {"a": 1}, [1], object()],
    )
    def test_invalid_values(self, value):
        """Missing, falsy, non-numeric and container values are invalid."""
        assert is_invalid(value)

    @pytest.mark.parametrize(
        "value",
        [1, -5, 1.5, "0", "1.25", "-3", "1e-7", "0x1f", Decimal("2.5"), float("inf")],
    )
    def test_valid_values(self, value):
        """Numbers and numeric strings are valid."""
        assert not is_invalid(value)

    def test_int_zero_is_valid(self):
        """Integer zero is exempt from the falsy check."""
        assert not is_invalid(0)

    def test_decimal_zero_is_valid(self):
        """Decimal zero is valid; only NaN is rejected."""
        assert not is_invalid(Decimal(0))
        assert is_invalid(Decimal("NaN"))


class TestToDecimal:
    """Tests for numeric coercion."""

    def test_float_uses_shortest_repr(self):
        """Floats convert through str, not their binary expansion."""
        assert to_decimal(0.1) == Decimal("0.1")

    def test_hex_string(self):
        """0x strings are read as hex integers."""
        assert to_decimal("0x10") == Decimal(16)
        assert to_decimal("-0xff") == Decimal(-255)

    def test_large_hex_is_exact(self):
        """uint256-sized hex values keep every digit."""
        assert to_decimal("0x" + "f" * 64) == Decimal(2**256 - 1)

    def test_invalid_becomes_zero(self):
        """Invalid input converts to zero."""
        assert to_decimal(None) == 0
        assert to_decimal("abc") == 0


class TestUnwrap:
    """Tests for live reference dereferencing."""

    def test_unwraps_box(self, box):
        """Objects exposing value are dereferenced."""
        assert unwrap(box("1.5")) == "1.5"

    def test_primitives_pass_through(self):
        """Primitive numbers are returned unchanged."""
        assert unwrap(5) == 5
        assert unwrap("5") == "5"
        assert unwrap(None) is None


class TestSplitDecimal:
    """Tests for the decimal splitter."""

    def test_with_fraction(self):
        """Fractional part keeps the dot."""
        assert split_decimal("12.340") == DecimalParts("12", ".340")

    def test_without_fraction(self):
        """No dot gives an empty fractional part."""
        assert split_decimal("12") == DecimalParts("12", "")

    def test_splits_on_first_dot(self):
        """Only the first dot separates the parts."""
        assert split_decimal("1.2.3") == DecimalParts("1", ".2.3")
