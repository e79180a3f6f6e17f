"""Periodicity of a balances query."""

from enum import Enum


class Periodicity(str, Enum):
    """Granularity of the date buckets returned for a balances query.

    It depends on how the range params of the query are written.
    """

    DAILY = "DAILY"  # after:25/01/1983 before:04/03/2013, after:$d-30
    MONTHLY = "MONTHLY"  # after:jan/2013 before:mar/2013, after:$m-1
    YEARLY = "YEARLY"  # on:2013, after:2013, $y
