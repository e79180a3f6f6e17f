"""Fetch a balances report for a query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bkper_sdk.domain.balances import BalancesReport
from bkper_sdk.domain.ledger.ports import BalanceQueryPort, BookPort

if TYPE_CHECKING:
    from bkper_sdk.application.factories import PortFactory

logger = logging.getLogger(__name__)


class BalancesReportQuery:
    """Return the balances tree of a query, bound to the book's format."""

    def __init__(
        self,
        balance_query_port: BalanceQueryPort,
        book_port: BookPort,
    ):
        self._balances = balance_query_port
        self._book = book_port

    @classmethod
    def from_factory(cls, factory: PortFactory) -> BalancesReportQuery:
        return cls(
            balance_query_port=factory.balance_query_port(),
            book_port=factory.book_port(),
        )

    async def execute(self, query: str) -> BalancesReport:
        book_format = await self._book.get_book_format()
        payload = await self._balances.fetch_balances(query)
        logger.debug(
            "Fetched balances: query=%r, groups=%d, accounts=%d",
            query,
            len(payload.group_balances),
            len(payload.account_balances),
        )
        return BalancesReport(payload, book_format)
