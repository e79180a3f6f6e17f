"""Book formatting settings: precision, decimal separator and date pattern."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bkper_sdk.domain.ledger.value_objects.fuzzy_date import split_fuzzy_date
from bkper_sdk.domain.ledger.value_objects.periodicity import Periodicity

_DATE_TOKENS = re.compile(r"yyyy|MM|dd")


class DecimalSeparator(str, Enum):
    """Decimal separator of numbers on a book."""

    COMMA = "COMMA"
    DOT = "DOT"

    @property
    def symbol(self) -> str:
        return "," if self == DecimalSeparator.COMMA else "."


class BookFormat(BaseModel):
    """Value object holding the formatting settings of a book."""

    model_config = ConfigDict(frozen=True)

    fraction_digits: int = Field(default=2, ge=0, le=8)
    decimal_separator: DecimalSeparator = DecimalSeparator.DOT
    date_pattern: str = "dd/MM/yyyy"
    time_zone: str = "UTC"

    @field_validator("date_pattern")
    @classmethod
    def validate_date_pattern(cls, v: str) -> str:
        tokens = _DATE_TOKENS.findall(v)
        if sorted(tokens) != sorted(["yyyy", "MM", "dd"]):
            msg = f"Date pattern must contain yyyy, MM and dd once: {v!r}"
            raise ValueError(msg)
        return v

    def round(self, value: Decimal | int | float | str) -> Decimal:
        """Round half-up to the fraction digits of the book."""
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        quantum = Decimal(1).scaleb(-self.fraction_digits)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
        # Avoid rendering "-0.00"
        if rounded.is_zero():
            return abs(rounded)
        return rounded

    def format_value(self, value: Any) -> str:
        if value is None:
            return ""
        text = f"{self.round(value):f}"
        if self.decimal_separator == DecimalSeparator.COMMA:
            text = text.replace(".", ",")
        return text

    def format_fuzzy_date(
        self,
        fuzzy_date: int,
        periodicity: Periodicity = Periodicity.DAILY,
    ) -> str:
        """Render a fuzzy date with the book pattern, trimmed to periodicity.

        Monthly buckets drop the day token, yearly buckets keep only the year.
        """
        year, month, day = split_fuzzy_date(fuzzy_date)
        tokens = _DATE_TOKENS.findall(self.date_pattern)
        if periodicity == Periodicity.MONTHLY:
            tokens = [t for t in tokens if t != "dd"]
        elif periodicity == Periodicity.YEARLY:
            tokens = ["yyyy"]

        rendered = {
            "yyyy": f"{year:04d}",
            "MM": f"{month:02d}",
            "dd": f"{day:02d}",
        }
        return self._separator().join(rendered[t] for t in tokens)

    def _separator(self) -> str:
        separators = _DATE_TOKENS.split(self.date_pattern)
        for separator in separators:
            if separator:
                return separator
        return "/"
