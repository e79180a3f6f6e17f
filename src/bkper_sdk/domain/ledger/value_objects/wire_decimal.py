"""Parsing of decimal values sent as strings by the remote API."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any


def parse_wire_decimal(v: Any) -> Decimal:
    """
    Parse a decimal sent by the API; None and "" mean zero.

    Raises
    ------
    ValueError
        If the value is not a finite decimal, so pydantic reports it as a
        validation error
    """
    if v is None or v == "":
        return Decimal("0")
    if isinstance(v, Decimal):
        value = v
    else:
        try:
            value = Decimal(str(v).strip())
        except InvalidOperation as e:
            msg = f"Invalid decimal value: {v!r}"
            raise ValueError(msg) from e
    if not value.is_finite():
        msg = f"Decimal value must be finite: {v!r}"
        raise ValueError(msg)
    return value
