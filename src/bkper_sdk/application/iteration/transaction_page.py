"""One fetched page of a transaction search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bkper_sdk.domain.ledger.ports import PageFetcher, TransactionList
    from bkper_sdk.domain.ledger.value_objects import TransactionRecord

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 1000


class TransactionPage:
    """A batch of transactions plus a read index into it.

    ``reached_end`` is true when the batch is empty or came without a
    cursor: no page follows this one.
    """

    def __init__(
        self,
        items: list[TransactionRecord] | None,
        cursor: str | None,
        account: str | None = None,
    ):
        self._items: list[TransactionRecord] = list(items or [])
        self._cursor = cursor
        self._account = account
        self._index = 0
        self._reached_end = not self._items or not cursor

    @classmethod
    def from_list(cls, transaction_list: TransactionList) -> TransactionPage:
        return cls(
            items=transaction_list.items,
            cursor=transaction_list.cursor,
            account=transaction_list.account,
        )

    @classmethod
    async def load(
        cls,
        page_fetcher: PageFetcher,
        query: str,
        cursor: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> TransactionPage:
        """Fetch one page. Fetch errors propagate unchanged."""
        transaction_list = await page_fetcher.fetch_page(query, page_size, cursor)
        page = cls.from_list(transaction_list)
        logger.debug(
            "Fetched page: query=%r, cursor=%s, items=%d, reached_end=%s",
            query,
            "yes" if cursor else "none",
            len(page),
            page.reached_end,
        )
        return page

    @property
    def cursor(self) -> str | None:
        """Cursor to fetch the page that follows this one."""
        return self._cursor

    @property
    def account(self) -> str | None:
        return self._account

    @property
    def reached_end(self) -> bool:
        return self._reached_end

    def __len__(self) -> int:
        return len(self._items)

    def has_next(self) -> bool:
        return self._index < len(self._items)

    def next(self) -> TransactionRecord | None:
        if self._index < len(self._items):
            record = self._items[self._index]
            self._index += 1
            return record
        return None

    def get_index(self) -> int:
        """Read index; 0 once the page is exhausted."""
        if self._index >= len(self._items):
            return 0
        return self._index

    def set_index(self, index: int) -> None:
        """Force the read index, clamped to the page bounds."""
        self._index = max(0, min(index, len(self._items)))
