"""Port factory protocol for the application layer."""

from __future__ import annotations

from typing import Protocol

from bkper_sdk.domain.ledger.ports import BalanceQueryPort, BookPort, PageFetcher


class PortFactory(Protocol):
    """Protocol for creating the book-scoped ports the queries need."""

    @property
    def page_size(self) -> int:
        """Page size limit for transaction searches."""
        ...

    def page_fetcher(self) -> PageFetcher:
        """Get the paged transaction search port."""
        ...

    def balance_query_port(self) -> BalanceQueryPort:
        """Get the balances query port."""
        ...

    def book_port(self) -> BookPort:
        """Get the book settings port."""
        ...
