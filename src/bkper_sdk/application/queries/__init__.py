"""Query layer. Read-only operations against the remote book."""

from bkper_sdk.application.queries.balances_data_table_query import (
    BalancesDataTableQuery,
)
from bkper_sdk.application.queries.balances_report_query import BalancesReportQuery
from bkper_sdk.application.queries.list_transactions_query import (
    ListTransactionsQuery,
)

__all__ = [
    "BalancesDataTableQuery",
    "BalancesReportQuery",
    "ListTransactionsQuery",
]
