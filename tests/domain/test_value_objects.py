"""Unit tests for the monetary helpers."""

from decimal import Decimal

import pytest

from ordermodel.domain.exceptions import InvalidArgumentError
from ordermodel.domain.model.value_objects import (
    format_money,
    normalize_amount,
    to_amount,
)


# ── to_amount ────────────────────────────────────────────────────────────────


class TestToAmount:

    def test_decimal_passes_through(self):
        value = Decimal("10.50")
        assert to_amount(value) is value

    def test_from_string(self):
        assert to_amount("25.99") == Decimal("25.99")

    def test_from_int(self):
        assert to_amount(10) == Decimal("10")

    def test_from_float_uses_short_repr(self):
        assert to_amount(4.5) == Decimal("4.5")
        assert to_amount(0.1) == Decimal("0.1")

    def test_negative_kept(self):
        assert to_amount("-3") == Decimal("-3")

    @pytest.mark.parametrize(
        "raw",
        [
            "abc", "", True, float("inf"), "NaN",
            Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity"),
        ],
    )
    def test_invalid_rejected(self, raw):
        with pytest.raises(InvalidArgumentError, match="Invalid money amount"):
            to_amount(raw)


# ── normalize_amount ─────────────────────────────────────────────────────────


class TestNormalizeAmount:

    def test_numbers_become_decimal(self):
        assert normalize_amount(3) == Decimal("3")
        assert isinstance(normalize_amount(2.25), Decimal)

    def test_other_values_untouched(self):
        assert normalize_amount(None) is None
        assert normalize_amount("1.00") == "1.00"
        assert normalize_amount(True) is True


# ── format_money ─────────────────────────────────────────────────────────────


class TestFormatMoney:

    def test_two_decimals(self):
        assert format_money(Decimal("15")) == "$15.00"
        assert format_money(Decimal("9.5")) == "$9.50"

    def test_thousands_separator(self):
        assert format_money(Decimal("1234.5")) == "$1,234.50"

    def test_negative(self):
        assert format_money(Decimal("-2.5")) == "-$2.50"

    def test_custom_symbol(self):
        assert format_money(Decimal("3"), symbol="€") == "€3.00"
