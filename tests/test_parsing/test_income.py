"""Tests for income text parsing and normalization."""

from decimal import Decimal

import pytest

from taxcalc.parsing.income import MAX_INCOME, normalize_income, parse_income


class TestParseIncome:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("150000", "150000"),
            ("$150,000", "150000"),
            ("  75,000.50 USD ", "75000.50"),
            (".5", "0.5"),
            ("12.", "12"),
        ],
    )
    def test_valid_text(self, raw, expected):
        assert parse_income(raw) == Decimal(expected)

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "-", ".", "1.2.3", "5-", "--5", None])
    def test_malformed_text_is_zero(self, raw):
        assert parse_income(raw) == Decimal("0")

    def test_negative_clamps_to_zero(self):
        assert parse_income("-25000") == Decimal("0")
        assert parse_income("-0") == Decimal("0")

    def test_letters_inside_number_are_stripped(self):
        # "1e5" keeps only digits, so it reads as 15
        assert parse_income("1e5") == Decimal("15")

    def test_clamped_to_max(self):
        assert parse_income("9" * 30) == MAX_INCOME


class TestNormalizeIncome:
    def test_decimal_passthrough(self):
        assert normalize_income(Decimal("123.45")) == Decimal("123.45")

    def test_int_and_float(self):
        assert normalize_income(50000) == Decimal("50000")
        assert normalize_income(0.1) == Decimal("0.1")

    @pytest.mark.parametrize(
        "value",
        [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), Decimal("Infinity"), -1, Decimal("-3")],
    )
    def test_out_of_domain_is_zero(self, value):
        assert normalize_income(value) == Decimal("0")

    def test_strings_use_parser(self):
        assert normalize_income("$1,000") == Decimal("1000")

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            normalize_income([100])
