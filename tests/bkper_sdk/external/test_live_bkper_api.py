"""Tests against a real Bkper book (requires credentials).

Needs ``BKPER_TEST_BOOK_ID`` plus ``BKPER_ACCESS_TOKEN`` or ``BKPER_API_KEY``,
e.g. in ``config/.env.dev``. Optional ``BKPER_TEST_QUERY`` narrows the
transaction search and ``BKPER_TEST_BALANCES_QUERY`` the balances query.
"""

import os

import pytest
import pytest_asyncio

from bkper_config import get_settings
from bkper_sdk import BkperClient
from bkper_sdk.domain.balances.services import transpose_matrix
from bkper_sdk.domain.ledger.value_objects import BalanceType

pytestmark = pytest.mark.external


@pytest.fixture(scope="module")
def book_id():
    """Book under test, skipping the module when credentials are missing."""
    book_id = os.getenv("BKPER_TEST_BOOK_ID")
    if not book_id:
        pytest.skip("BKPER_TEST_BOOK_ID not set")
    settings = get_settings()
    if settings.access_token is None and settings.api_key is None:
        pytest.skip("Neither BKPER_ACCESS_TOKEN nor BKPER_API_KEY set")
    return book_id


@pytest_asyncio.fixture
async def bkper(book_id):
    async with BkperClient(book_id) as client:
        yield client


async def take(iterator, count):
    items = []
    while len(items) < count and await iterator.has_next():
        items.append(await iterator.next())
    return items


@pytest.mark.asyncio
async def test_resumed_iteration_continues_where_it_stopped(bkper):
    query = os.getenv("BKPER_TEST_QUERY", "")

    first = await bkper.get_transactions(query)
    head = await take(first, 3)
    token = first.get_continuation_token()
    expected = [record.id for record in await take(first, 5)]

    resumed = await bkper.get_transactions(query, continuation_token=token)
    actual = [record.id for record in await take(resumed, 5)]

    assert len({record.id for record in head}) == len(head)
    assert actual == expected


@pytest.mark.asyncio
async def test_balances_table_is_rectangular(bkper):
    query = os.getenv("BKPER_TEST_BALANCES_QUERY", "group:'Assets'")

    matrix = await bkper.create_balances_data_table(
        query,
        balance_type=BalanceType.CUMULATIVE,
    )
    transposed = await bkper.create_balances_data_table(
        query,
        balance_type=BalanceType.CUMULATIVE,
        transposed=True,
    )

    assert len({len(row) for row in matrix}) <= 1
    assert transpose_matrix(transposed) == matrix
