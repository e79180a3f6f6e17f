"""Unit tests for the BookFormat value object."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from bkper_sdk.domain.ledger.value_objects import (
    BookFormat,
    DecimalSeparator,
    Periodicity,
)


class TestBookFormatRounding:
    def test_round_half_up(self):
        book_format = BookFormat(fraction_digits=2)

        assert book_format.round(Decimal("1.005")) == Decimal("1.01")
        assert book_format.round(Decimal("-1.005")) == Decimal("-1.01")
        assert book_format.round("2.344") == Decimal("2.34")

    def test_round_to_zero_fraction_digits(self):
        assert BookFormat(fraction_digits=0).round(Decimal("2.5")) == Decimal("3")

    def test_round_never_returns_negative_zero(self):
        rounded = BookFormat().round(Decimal("-0.001"))

        assert rounded == 0
        assert not rounded.is_signed()

    def test_fraction_digits_are_bounded(self):
        with pytest.raises(ValidationError):
            BookFormat(fraction_digits=9)


class TestBookFormatValues:
    def test_format_value_with_dot(self):
        assert BookFormat().format_value(Decimal("1234.5")) == "1234.50"

    def test_format_value_with_comma(self):
        book_format = BookFormat(decimal_separator=DecimalSeparator.COMMA)

        assert book_format.format_value(Decimal("-1234.567")) == "-1234,57"

    def test_format_none_is_empty(self):
        assert BookFormat().format_value(None) == ""

    def test_decimal_separator_symbol(self):
        assert DecimalSeparator.COMMA.symbol == ","
        assert DecimalSeparator.DOT.symbol == "."


class TestBookFormatDates:
    @pytest.mark.parametrize(
        ("pattern", "periodicity", "fuzzy_date", "expected"),
        [
            ("dd/MM/yyyy", Periodicity.DAILY, 20240309, "09/03/2024"),
            ("MM/dd/yyyy", Periodicity.DAILY, 20240309, "03/09/2024"),
            ("yyyy/MM/dd", Periodicity.DAILY, 20240309, "2024/03/09"),
            ("dd/MM/yyyy", Periodicity.MONTHLY, 20240300, "03/2024"),
            ("yyyy/MM/dd", Periodicity.MONTHLY, 20240300, "2024/03"),
            ("dd/MM/yyyy", Periodicity.YEARLY, 20240000, "2024"),
            ("dd-MM-yyyy", Periodicity.DAILY, 20240309, "09-03-2024"),
        ],
    )
    def test_format_fuzzy_date(self, pattern, periodicity, fuzzy_date, expected):
        book_format = BookFormat(date_pattern=pattern)

        assert book_format.format_fuzzy_date(fuzzy_date, periodicity) == expected

    def test_invalid_date_pattern_is_rejected(self):
        with pytest.raises(ValidationError):
            BookFormat(date_pattern="dd/MM")
