"""Search transactions of a book, page by page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bkper_sdk.application.iteration import DEFAULT_PAGE_SIZE, TransactionIterator
from bkper_sdk.domain.ledger.ports import PageFetcher

if TYPE_CHECKING:
    from bkper_sdk.application.factories import PortFactory


class ListTransactionsQuery:
    """Return a resumable iterator over the transactions matching a query."""

    def __init__(
        self,
        page_fetcher: PageFetcher,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._page_fetcher = page_fetcher
        self._page_size = page_size

    @classmethod
    def from_factory(cls, factory: PortFactory) -> ListTransactionsQuery:
        return cls(
            page_fetcher=factory.page_fetcher(),
            page_size=factory.page_size,
        )

    async def execute(
        self,
        query: str = "",
        continuation_token: str | None = None,
        strict: bool = False,
    ) -> TransactionIterator:
        iterator = TransactionIterator(
            self._page_fetcher,
            query,
            page_size=self._page_size,
        )
        await iterator.set_continuation_token(continuation_token, strict=strict)
        return iterator
