"""
Tests for result display formatting.
"""

import pytest

from fincalc.formatting import (
    format_currency,
    format_number,
    format_percent,
    format_years_and_months,
)


class TestCurrency:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, "$0.00"),
            (6000, "$6,000.00"),
            (1234.5, "$1,234.50"),
            (1384.6153846, "$1,384.62"),
            (34.6153846, "$34.62"),
            (1234567.891, "$1,234,567.89"),
            (-1234.5, "-$1,234.50"),
            (0.125, "$0.13"),
            (1.005, "$1.01"),
        ],
    )
    def test_two_digits(self, value, expected):
        assert format_currency(value) == expected

    def test_digit_count(self):
        assert format_currency(1234567.891, 0) == "$1,234,568"
        assert format_currency(2.5, 3) == "$2.500"

    def test_small_negative_keeps_sign(self):
        assert format_currency(-0.001) == "-$0.00"


class TestNumber:
    @pytest.mark.parametrize(
        "value,digits,expected",
        [
            (20, 0, "20"),
            (97.5142, 0, "98"),
            (1234.5, 2, "1,234.5"),
            (1234.0, 2, "1,234"),
            (1000000, 0, "1,000,000"),
            (2.5, 0, "3"),
        ],
    )
    def test_format_number(self, value, digits, expected):
        assert format_number(value, digits) == expected


class TestPercent:
    @pytest.mark.parametrize(
        "value,expected",
        [(1.0, "1.00%"), (6.5, "6.50%"), (0, "0.00%"), (0.25, "0.25%"), (-2, "-2.00%")],
    )
    def test_format_percent(self, value, expected):
        assert format_percent(value) == expected

    def test_digits(self):
        assert format_percent(6.5, 1) == "6.5%"
        assert format_percent(1.0, 0) == "1%"


class TestYearsAndMonths:
    @pytest.mark.parametrize(
        "months,expected",
        [
            (1, "1 month"),
            (0.3, "1 month"),
            (11, "11 months"),
            (12, "1 year"),
            (13, "1 year 1 month"),
            (24, "2 years"),
            (97.5142, "8 years 2 months"),
            (25.2, "2 years 2 months"),
        ],
    )
    def test_duration(self, months, expected):
        assert format_years_and_months(months) == expected

    @pytest.mark.parametrize("months", [0, -5, float("nan"), float("inf")])
    def test_degenerate_input(self, months):
        assert format_years_and_months(months) == "0 months"
