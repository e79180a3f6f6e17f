"""HTTP adapters implementing the ledger ports."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from bkper_sdk.domain.balances.payloads import BalancesPayload
from bkper_sdk.domain.ledger.exceptions import BookNotFoundError, RemoteFetchError
from bkper_sdk.domain.ledger.ports import (
    BalanceQueryPort,
    BookPort,
    PageFetcher,
    TransactionList,
)
from bkper_sdk.domain.ledger.value_objects import (
    BookFormat,
    DecimalSeparator,
    TransactionRecord,
)

if TYPE_CHECKING:
    from bkper_sdk.infrastructure.http.client import BkperApiClient

logger = logging.getLogger(__name__)


def _malformed_response(what: str, error: Exception) -> RemoteFetchError:
    logger.warning("Malformed %s response: %s", what, error)
    return RemoteFetchError(f"Malformed {what} response from the remote service")


class HttpPageFetcher(PageFetcher):
    """Paged transaction search over ``BkperApiClient``."""

    def __init__(self, client: BkperApiClient):
        self._client = client

    async def fetch_page(
        self,
        query: str,
        limit: int,
        cursor: str | None = None,
    ) -> TransactionList:
        data = await self._client.search_transactions(query, limit, cursor)
        if not data:
            return TransactionList()

        try:
            items = [
                TransactionRecord.model_validate(item)
                for item in data.get("items") or []
            ]
        except PydanticValidationError as e:
            raise _malformed_response("transaction search", e) from e

        return TransactionList(
            items=items,
            cursor=data.get("cursor") or None,
            account=data.get("account"),
        )


class HttpBalanceQueryAdapter(BalanceQueryPort):
    """Balances query over ``BkperApiClient``. A 404 is an empty tree."""

    def __init__(self, client: BkperApiClient):
        self._client = client

    async def fetch_balances(self, query: str) -> BalancesPayload:
        data = await self._client.get_balances(query)
        try:
            return BalancesPayload.model_validate(data or {})
        except PydanticValidationError as e:
            raise _malformed_response("balances", e) from e


class HttpBookAdapter(BookPort):
    """Book settings over ``BkperApiClient``, fetched once per adapter."""

    def __init__(self, client: BkperApiClient):
        self._client = client
        self._book_format: BookFormat | None = None

    async def get_book_format(self) -> BookFormat:
        if self._book_format is None:
            data = await self._client.get_book()
            if data is None:
                raise BookNotFoundError(self._client.book_id)
            self._book_format = self._to_book_format(data)
        return self._book_format

    @staticmethod
    def _to_book_format(data: dict[str, Any]) -> BookFormat:
        values: dict[str, Any] = {}
        if data.get("fractionDigits") is not None:
            values["fraction_digits"] = int(data["fractionDigits"])
        if data.get("decimalSeparator"):
            values["decimal_separator"] = DecimalSeparator(data["decimalSeparator"])
        if data.get("datePattern"):
            values["date_pattern"] = data["datePattern"]
        if data.get("timeZone"):
            values["time_zone"] = data["timeZone"]
        try:
            return BookFormat(**values)
        except (PydanticValidationError, ValueError) as e:
            raise _malformed_response("book", e) from e


class HttpPortFactory:
    """Creates the book-scoped ports on top of one ``BkperApiClient``."""

    def __init__(self, client: BkperApiClient):
        self._client = client
        self._book_adapter = HttpBookAdapter(client)

    @property
    def page_size(self) -> int:
        return self._client.page_size

    def page_fetcher(self) -> PageFetcher:
        return HttpPageFetcher(self._client)

    def balance_query_port(self) -> BalanceQueryPort:
        return HttpBalanceQueryAdapter(self._client)

    def book_port(self) -> BookPort:
        return self._book_adapter
