"""Async Python client for the Bkper double-entry bookkeeping service."""

from bkper_sdk.application.iteration import TransactionIterator, TransactionPage
from bkper_sdk.client import BkperClient, configure_logging
from bkper_sdk.domain.balances import (
    AccountBalancesContainer,
    Balance,
    BalancesContainer,
    BalancesReport,
    GroupBalancesContainer,
)
from bkper_sdk.domain.balances.services import BalancesDataTableBuilder
from bkper_sdk.domain.ledger.value_objects import (
    BalanceCheckedType,
    BalanceType,
    BookFormat,
    DecimalSeparator,
    Periodicity,
    TransactionRecord,
)

__all__ = [
    "AccountBalancesContainer",
    "Balance",
    "BalanceCheckedType",
    "BalanceType",
    "BalancesContainer",
    "BalancesDataTableBuilder",
    "BalancesReport",
    "BkperClient",
    "BookFormat",
    "DecimalSeparator",
    "GroupBalancesContainer",
    "Periodicity",
    "TransactionIterator",
    "TransactionPage",
    "TransactionRecord",
    "configure_logging",
]
