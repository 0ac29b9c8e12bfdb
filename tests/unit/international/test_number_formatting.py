"""Test display formatting of canonical amounts."""
import math
import pytest
from decimal import Decimal
from currency_input.international.locale_registry import lookup, supported_currency_codes
from currency_input.international.number_formatting import format_for_display, input_hints, placeholder
from currency_input.international.number_parsing import parse_from_display
from currency_input.models.locale import LocaleProfile


class TestFormatForDisplay:
    def test_usd_grouping(self, usd):
        assert format_for_display(1234.5, usd) == "1,234.50"

    def test_brl_grouping(self, brl):
        assert format_for_display(1234.5, brl) == "1.234,50"

    def test_chf_apostrophe(self, chf):
        assert format_for_display(1234.5, chf) == "1'234.50"

    @pytest.mark.parametrize("code", supported_currency_codes())
    def test_zero_is_empty(self, code):
        assert format_for_display(0, lookup(code)) == ""

    def test_non_finite_is_empty(self, usd):
        assert format_for_display(math.nan, usd) == ""
        assert format_for_display(math.inf, usd) == ""
        assert format_for_display(None, usd) == ""

    def test_small_amounts(self, usd):
        assert format_for_display(5, usd) == "5.00"
        assert format_for_display(0.5, usd) == "0.50"
        assert format_for_display(999, usd) == "999.00"
        assert format_for_display(1000, usd) == "1,000.00"

    def test_millions(self, usd):
        assert format_for_display(1234567.891, usd) == "1,234,567.89"

    def test_rounds_half_away_from_zero(self, usd):
        assert format_for_display(1.005, usd) == "1.01"

    def test_negative_keeps_sign(self, usd):
        assert format_for_display(-1234.5, usd) == "-1,234.50"

    def test_decimal_input(self, brl):
        assert format_for_display(Decimal("98765.4"), brl) == "98.765,40"

    def test_zero_decimal_places(self):
        profile = LocaleProfile(currency_code="USD", symbol="$", decimal_places=0)
        assert format_for_display(1234.5, profile) == "1,235"

    @pytest.mark.parametrize("value", [0.01, 0.1, 1, 12.34, 999.99, 1000, 123456.78, 98765432.1])
    def test_parse_recovers_value(self, value):
        for code in supported_currency_codes():
            profile = lookup(code)
            assert parse_from_display(format_for_display(value, profile), profile) == value


class TestDisplayHints:
    def test_placeholder(self, usd, brl):
        assert placeholder(usd) == "0.00"
        assert placeholder(brl) == "0,00"

    def test_input_hints(self, brl):
        hints = input_hints(brl)
        assert hints["inputmode"] == "decimal"
        assert hints["pattern"] == "[0-9]*[.,]?[0-9]*"
        assert hints["placeholder"] == "0,00"
