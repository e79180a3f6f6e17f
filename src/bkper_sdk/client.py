"""Book-scoped client wiring settings, HTTP adapters and queries."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from bkper_config import ApiConfig, get_settings
from bkper_sdk.application.queries import (
    BalancesDataTableQuery,
    BalancesReportQuery,
    ListTransactionsQuery,
)
from bkper_sdk.infrastructure.export import ExcelTableWriter
from bkper_sdk.infrastructure.http import BkperApiClient, HttpPortFactory

if TYPE_CHECKING:
    import httpx

    from bkper_sdk.application.iteration import TransactionIterator
    from bkper_sdk.domain.balances import BalancesReport
    from bkper_sdk.domain.balances.services import Matrix
    from bkper_sdk.infrastructure.http import TokenProvider


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure SDK logging.

    Sets up console logging with timestamps and module names, the
    configured level for ``bkper_sdk`` modules and WARNING for the
    HTTP libraries.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("bkper_sdk").setLevel(log_level)
    logging.getLogger("bkper_config").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


class BkperClient:
    """
    Entry point for reading one book.

    Usage::

        async with BkperClient("book-id") as bkper:
            iterator = await bkper.get_transactions("account:'Cash'")
            async for transaction in iterator:
                ...

    Parameters
    ----------
    book_id
        Id of the book to read
    api_config
        Transport configuration; built from ``get_settings()`` when omitted
    token_provider
        Async callable returning an OAuth access token, tried before the
        configured ``access_token``
    transport
        Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
    """

    def __init__(
        self,
        book_id: str,
        api_config: ApiConfig | None = None,
        token_provider: TokenProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api = BkperApiClient(
            api_config or get_settings().api_config(),
            book_id,
            token_provider=token_provider,
            transport=transport,
        )
        self._factory = HttpPortFactory(self._api)

    @property
    def book_id(self) -> str:
        return self._api.book_id

    async def __aenter__(self) -> BkperClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._api.close()

    async def get_transactions(
        self,
        query: str = "",
        continuation_token: str | None = None,
        strict: bool = False,
    ) -> TransactionIterator:
        """Iterator over the transactions matching ``query``."""
        return await ListTransactionsQuery.from_factory(self._factory).execute(
            query,
            continuation_token=continuation_token,
            strict=strict,
        )

    async def get_balances_report(self, query: str) -> BalancesReport:
        return await BalancesReportQuery.from_factory(self._factory).execute(query)

    async def create_balances_data_table(self, query: str, **options: Any) -> Matrix:
        """Balances of ``query`` as a matrix.

        ``options`` are the keyword arguments of
        ``BalancesDataTableQuery.create_builder`` (``balance_type``, ``expanded``,
        ``transposed`` and so on).
        """
        return await BalancesDataTableQuery.from_factory(self._factory).execute(
            query,
            **options,
        )

    async def export_balances_xlsx(
        self,
        query: str,
        title: str = "Balances",
        **options: Any,
    ) -> bytes:
        """Balances of ``query`` rendered as an xlsx workbook."""
        table_query = BalancesDataTableQuery.from_factory(self._factory)
        builder = await table_query.create_builder(query, **options)
        matrix = builder.build()
        writer = ExcelTableWriter(fraction_digits=builder.book_format.fraction_digits)
        logger.debug("Exporting %d rows for query %r", len(matrix), query)
        return writer.write(matrix, title=title, header=builder.has_header_row())
