"""Ports the ledger domain needs from the remote bookkeeping service."""

from bkper_sdk.domain.ledger.ports.balance_query_port import BalanceQueryPort
from bkper_sdk.domain.ledger.ports.book_port import BookPort
from bkper_sdk.domain.ledger.ports.page_fetcher import PageFetcher, TransactionList

__all__ = [
    "BalanceQueryPort",
    "BookPort",
    "PageFetcher",
    "TransactionList",
]
