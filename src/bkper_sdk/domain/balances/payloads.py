"""Wire payload models for the balances endpoint.

Decimal values arrive as strings; missing values default to zero and
missing lists to empty, so the balance tree never has to null-check.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from bkper_sdk.domain.ledger.value_objects import (
    BalanceCheckedType,
    Periodicity,
    parse_wire_decimal,
)

_BALANCE_FIELDS = (
    "period_balance",
    "cumulative_balance",
    "checked_period_balance",
    "checked_cumulative_balance",
    "unchecked_period_balance",
    "unchecked_cumulative_balance",
)


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class _BalanceValues(_WireModel):
    period_balance: Decimal = Decimal("0")
    cumulative_balance: Decimal = Decimal("0")
    checked_period_balance: Decimal = Decimal("0")
    checked_cumulative_balance: Decimal = Decimal("0")
    unchecked_period_balance: Decimal = Decimal("0")
    unchecked_cumulative_balance: Decimal = Decimal("0")

    @field_validator(*_BALANCE_FIELDS, mode="before")
    @classmethod
    def validate_decimal(cls, v: Any) -> Decimal:
        return parse_wire_decimal(v)


class BalancePayload(_BalanceValues):
    """Balance of a container inside one date bucket."""

    fuzzy_date: int = 0
    day: int = 0
    month: int = 0
    year: int = 0

    @field_validator("fuzzy_date", "day", "month", "year", mode="before")
    @classmethod
    def validate_int(cls, v: Any) -> int:
        return 0 if v is None else int(v)


class _ContainerPayload(_BalanceValues):
    name: str = ""
    balances: list[BalancePayload] = Field(default_factory=list)

    @field_validator("balances", mode="before")
    @classmethod
    def validate_balances(cls, v: Any) -> list[Any]:
        return [] if v is None else v


class AccountBalancesPayload(_ContainerPayload):
    """Balances of a single account."""

    credit: bool = False


class GroupBalancesPayload(_ContainerPayload):
    """Balances of a group, nesting its child accounts and groups."""

    credit: bool | None = None  # Derived from descendants when absent
    account_balances: list[AccountBalancesPayload] = Field(default_factory=list)
    group_balances: list[GroupBalancesPayload] = Field(default_factory=list)

    @field_validator("account_balances", "group_balances", mode="before")
    @classmethod
    def validate_children(cls, v: Any) -> list[Any]:
        return [] if v is None else v


class BalancesPayload(_WireModel):
    """Root of one balances query result."""

    periodicity: Periodicity = Periodicity.DAILY
    balance_checked_type: BalanceCheckedType = BalanceCheckedType.FULL_BALANCE
    account_balances: list[AccountBalancesPayload] = Field(default_factory=list)
    group_balances: list[GroupBalancesPayload] = Field(default_factory=list)

    @field_validator("periodicity", mode="before")
    @classmethod
    def validate_periodicity(cls, v: Any) -> Any:
        return Periodicity.DAILY if v is None else v

    @field_validator("balance_checked_type", mode="before")
    @classmethod
    def validate_checked_type(cls, v: Any) -> Any:
        return BalanceCheckedType.FULL_BALANCE if v is None else v

    @field_validator("account_balances", "group_balances", mode="before")
    @classmethod
    def validate_roots(cls, v: Any) -> list[Any]:
        return [] if v is None else v


GroupBalancesPayload.model_rebuild()
