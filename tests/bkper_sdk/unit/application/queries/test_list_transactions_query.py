"""Unit tests for ListTransactionsQuery."""

from unittest.mock import Mock

import pytest

from bkper_sdk.application.iteration import TransactionIterator
from bkper_sdk.application.queries import ListTransactionsQuery
from bkper_sdk.domain.ledger.exceptions import InvalidContinuationTokenError
from tests.shared.fixtures.factories import FakePageFetcher, ids


class TestListTransactionsQuery:
    @pytest.mark.asyncio
    async def test_execute_returns_lazy_iterator(self):
        fetcher = FakePageFetcher.paged([2, 1])
        query = ListTransactionsQuery(fetcher, page_size=2)

        iterator = await query.execute("account:Cash")

        assert isinstance(iterator, TransactionIterator)
        assert iterator.query == "account:Cash"
        assert fetcher.calls == []

    @pytest.mark.asyncio
    async def test_execute_resumes_from_token(self):
        fetcher = FakePageFetcher.paged([2, 1])
        query = ListTransactionsQuery(fetcher, page_size=2)

        iterator = await query.execute("", continuation_token="null_bkperpageindex_1")

        assert ids([r async for r in iterator]) == ["i2", "i3"]

    @pytest.mark.asyncio
    async def test_execute_strict_rejects_malformed_token(self):
        query = ListTransactionsQuery(FakePageFetcher.paged([1]))

        with pytest.raises(InvalidContinuationTokenError):
            await query.execute("", continuation_token="garbage", strict=True)


class TestListTransactionsQueryDependencyInjection:
    @pytest.mark.asyncio
    async def test_from_factory_uses_factory_page_size(self):
        fetcher = FakePageFetcher.paged([1])
        mock_factory = Mock()
        mock_factory.page_fetcher.return_value = fetcher
        mock_factory.page_size = 25

        query = ListTransactionsQuery.from_factory(mock_factory)
        iterator = await query.execute("q")
        await iterator.has_next()

        mock_factory.page_fetcher.assert_called_once()
        assert fetcher.calls == [("q", 25, None)]
