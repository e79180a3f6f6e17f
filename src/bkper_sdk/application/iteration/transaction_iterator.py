"""Resumable iteration over a paged transaction search."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bkper_sdk.application.iteration.continuation_token import ContinuationToken
from bkper_sdk.application.iteration.transaction_page import (
    DEFAULT_PAGE_SIZE,
    TransactionPage,
)
from bkper_sdk.domain.ledger.exceptions import InvalidContinuationTokenError

if TYPE_CHECKING:
    from bkper_sdk.domain.ledger.ports import PageFetcher
    from bkper_sdk.domain.ledger.value_objects import TransactionRecord

logger = logging.getLogger(__name__)


# =============================================================================
# Iterator states
# =============================================================================


@dataclass(frozen=True)
class _Empty:
    """No page fetched yet."""


@dataclass(frozen=True)
class _Loaded:
    """Current page loaded; ``cursor`` is the one used to fetch it."""

    current: TransactionPage
    cursor: str | None


@dataclass(frozen=True)
class _LoadedWithLookahead:
    """Current page exhausted but not terminal, next page already fetched."""

    current: TransactionPage
    cursor: str | None
    lookahead: TransactionPage


_State = _Empty | _Loaded | _LoadedWithLookahead


class TransactionIterator:
    """
    Pull-based iterator over the transactions matching a query.

    Pages are fetched one at a time, with at most one page of look-ahead
    to answer ``has_next()`` at a page boundary. The position can be saved
    with ``get_continuation_token()`` and restored in another iterator
    (or process) with ``set_continuation_token()``.

    Resuming is replay-and-skip: the page for the saved cursor is fetched
    again and the saved number of items is skipped. If the ledger changed
    in between, items may be skipped or repeated; no snapshot is kept.
    """

    def __init__(
        self,
        page_fetcher: PageFetcher,
        query: str,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._page_fetcher = page_fetcher
        self._query = query
        self._page_size = page_size
        self._state: _State = _Empty()

    @property
    def query(self) -> str:
        return self._query

    async def has_next(self) -> bool:
        """Whether another transaction is available, fetching as needed."""
        state = await self._ensure_current()
        if state.current.has_next():
            return True
        if state.current.reached_end:
            return False

        lookahead = await self._ensure_lookahead(state)
        return lookahead.has_next()

    async def next(self) -> TransactionRecord | None:
        """Return the next transaction, or None once the stream is exhausted."""
        state = await self._ensure_current()
        if state.current.has_next():
            return state.current.next()
        if state.current.reached_end:
            return None

        next_cursor = state.current.cursor
        if isinstance(state, _LoadedWithLookahead):
            page = state.lookahead
        else:
            page = await self._load_page(next_cursor)

        self._state = _Loaded(current=page, cursor=next_cursor)
        return page.next()

    async def get_account(self) -> str | None:
        """Account id of the current page, when the query filters one account."""
        state = await self._ensure_current()
        return state.current.account

    def get_continuation_token(self) -> str | None:
        """
        Serialize the current position.

        Returns None if no page was fetched yet. An exhausted page that is
        not the last one yields a token at the start of the following page,
        so resuming never replays items already returned.
        """
        state = self._state
        if isinstance(state, _Empty):
            return None

        current = state.current
        if current.has_next():
            token = ContinuationToken(state.cursor, current.get_index())
        elif not current.reached_end:
            token = ContinuationToken(current.cursor, 0)
        else:
            token = ContinuationToken(state.cursor, len(current))
        return token.encode()

    async def set_continuation_token(
        self,
        token: str | None,
        strict: bool = False,
    ) -> None:
        """
        Resume from a token produced by ``get_continuation_token()``.

        A None token is a no-op. A malformed token is logged and ignored,
        leaving the iterator where it was, unless ``strict`` is set.

        Raises
        ------
        InvalidContinuationTokenError
            If ``strict`` is set and the token cannot be decoded
        RemoteFetchError
            If re-fetching the page for the saved cursor fails
        """
        if token is None:
            return

        try:
            decoded = ContinuationToken.decode(token)
        except InvalidContinuationTokenError as e:
            if strict:
                raise
            logger.warning("Ignoring continuation token %r: %s", token, e.message)
            return

        page = await self._load_page(decoded.cursor)
        page.set_index(decoded.index)
        self._state = _Loaded(current=page, cursor=decoded.cursor)
        logger.debug(
            "Resumed iteration: query=%r, index=%d",
            self._query,
            decoded.index,
        )

    def __aiter__(self) -> TransactionIterator:
        return self

    async def __anext__(self) -> TransactionRecord:
        if not await self.has_next():
            raise StopAsyncIteration
        record = await self.next()
        if record is None:
            raise StopAsyncIteration
        return record

    async def _ensure_current(self) -> _Loaded | _LoadedWithLookahead:
        state = self._state
        if isinstance(state, _Empty):
            page = await self._load_page(None)
            state = _Loaded(current=page, cursor=None)
            self._state = state
        return state

    async def _ensure_lookahead(
        self,
        state: _Loaded | _LoadedWithLookahead,
    ) -> TransactionPage:
        if isinstance(state, _LoadedWithLookahead):
            return state.lookahead

        lookahead = await self._load_page(state.current.cursor)
        self._state = _LoadedWithLookahead(
            current=state.current,
            cursor=state.cursor,
            lookahead=lookahead,
        )
        return lookahead

    async def _load_page(self, cursor: str | None) -> TransactionPage:
        return await TransactionPage.load(
            self._page_fetcher,
            self._query,
            cursor,
            self._page_size,
        )
