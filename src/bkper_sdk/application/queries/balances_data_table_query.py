"""Fetch balances and render them as a table in one step."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bkper_sdk.application.queries.balances_report_query import BalancesReportQuery
from bkper_sdk.domain.ledger.value_objects import BalanceCheckedType, BalanceType

if TYPE_CHECKING:
    from bkper_sdk.application.factories import PortFactory
    from bkper_sdk.domain.balances import BalancesReport
    from bkper_sdk.domain.balances.services import (
        BalancesDataTableBuilder,
        Matrix,
    )


class BalancesDataTableQuery:
    """Return the matrix of a balances query under the given layout options.

    A query matching a single group (``group:'Assets'``) is rendered over
    the group's children, the way the report would be read in a sheet.
    """

    def __init__(self, report_query: BalancesReportQuery):
        self._report_query = report_query

    @classmethod
    def from_factory(cls, factory: PortFactory) -> BalancesDataTableQuery:
        return cls(report_query=BalancesReportQuery.from_factory(factory))

    async def execute(self, query: str, **options: Any) -> Matrix:
        """Fetch the balances of ``query`` and build the table.

        ``options`` are the layout keyword arguments of ``create_builder``.
        """
        builder = await self.create_builder(query, **options)
        return builder.build()

    async def create_builder(
        self,
        query: str,
        balance_type: BalanceType = BalanceType.TOTAL,
        expanded: bool = False,
        transposed: bool = False,
        format_values: bool = False,
        format_dates: bool = False,
        hide_names: bool = False,
        hide_dates: bool = False,
        balance_checked_type: BalanceCheckedType | None = None,
    ) -> BalancesDataTableBuilder:
        """Fetch the balances of ``query`` and configure a builder for them."""
        report = await self._report_query.execute(query)
        builder = (
            self._builder_for(report)
            .type(balance_type)
            .expanded(expanded)
            .transposed(transposed)
            .format_values(format_values)
            .format_dates(format_dates)
            .hide_names(hide_names)
            .hide_dates(hide_dates)
        )
        if balance_checked_type is not None:
            builder.balance_checked_type(balance_checked_type)
        return builder

    @staticmethod
    def _builder_for(report: BalancesReport) -> BalancesDataTableBuilder:
        if report.has_only_one_group():
            group = report.get_balances_containers()[0]
            return group.create_data_table()
        return report.create_data_table()
