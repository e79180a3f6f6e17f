"""Fuzzy date helpers.

A fuzzy date is an integer ``YYYYMMDD`` where month and/or day may be zero
to express monthly (``YYYYMM00``) or yearly (``YYYY0000``) buckets.
"""

from __future__ import annotations

from datetime import date

from bkper_sdk.domain.ledger.exceptions import InvalidFuzzyDateError
from bkper_sdk.domain.ledger.value_objects.periodicity import Periodicity


def split_fuzzy_date(fuzzy_date: int) -> tuple[int, int, int]:
    """Return ``(year, month, day)``; month and day may be zero."""
    if fuzzy_date < 0:
        raise InvalidFuzzyDateError(fuzzy_date)
    year, rest = divmod(fuzzy_date, 10000)
    month, day = divmod(rest, 100)
    if month > 12 or day > 31 or (month == 0 and day != 0):
        raise InvalidFuzzyDateError(fuzzy_date)
    return year, month, day


def make_fuzzy_date(year: int, month: int = 0, day: int = 0) -> int:
    return year * 10000 + month * 100 + day


def fuzzy_date_for(value: date, periodicity: Periodicity) -> int:
    """Truncate a calendar date to the bucket of the given periodicity."""
    if periodicity == Periodicity.YEARLY:
        return make_fuzzy_date(value.year)
    if periodicity == Periodicity.MONTHLY:
        return make_fuzzy_date(value.year, value.month)
    return make_fuzzy_date(value.year, value.month, value.day)


def fuzzy_date_to_date(fuzzy_date: int) -> date:
    """Calendar date of a fuzzy date; zero month or day map to the first."""
    year, month, day = split_fuzzy_date(fuzzy_date)
    return date(year, month or 1, day or 1)
