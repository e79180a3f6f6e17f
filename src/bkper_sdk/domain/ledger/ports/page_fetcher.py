"""Page fetcher port: one paged transaction search against the remote book."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from bkper_sdk.domain.ledger.value_objects import TransactionRecord


@dataclass(frozen=True)
class TransactionList:
    """One batch of a paged transaction search.

    ``cursor`` is opaque and must be forwarded verbatim. None or empty means
    there are no more pages.
    """

    items: list[TransactionRecord] = field(default_factory=list)
    cursor: str | None = None
    account: str | None = None  # Account id when the query filters one account


class PageFetcher(ABC):
    """
    Interface for paged transaction searches.

    Implementations must be idempotent for a given ``(query, cursor)``
    pair: fetching the same cursor twice returns the same page.
    """

    @abstractmethod
    async def fetch_page(
        self,
        query: str,
        limit: int,
        cursor: str | None = None,
    ) -> TransactionList:
        """
        Execute one page of a transaction search.

        Parameters
        ----------
        query
            Search query, as typed in the book search bar
        limit
            Maximum number of items in the page
        cursor
            Cursor returned with the previous page, None for the first page

        Returns
        -------
        The fetched batch plus the cursor of the following page

        Raises
        ------
        RemoteFetchError
            If the remote call fails
        """
