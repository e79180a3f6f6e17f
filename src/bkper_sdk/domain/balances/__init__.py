"""Balances domain: the container tree of a balances query."""

from bkper_sdk.domain.balances.balance import Balance
from bkper_sdk.domain.balances.balances_container import (
    AccountBalancesContainer,
    BalancesContainer,
    GroupBalancesContainer,
    balance_attribute,
    representative_value,
)
from bkper_sdk.domain.balances.balances_report import BalancesReport
from bkper_sdk.domain.balances.payloads import (
    AccountBalancesPayload,
    BalancePayload,
    BalancesPayload,
    GroupBalancesPayload,
)

__all__ = [
    "AccountBalancesContainer",
    "AccountBalancesPayload",
    "Balance",
    "BalancePayload",
    "BalancesContainer",
    "BalancesPayload",
    "BalancesReport",
    "GroupBalancesContainer",
    "GroupBalancesPayload",
    "balance_attribute",
    "representative_value",
]
