"""Balance of a container on a window of time (day, month or year)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from bkper_sdk.domain.ledger.value_objects import fuzzy_date_to_date

if TYPE_CHECKING:
    from bkper_sdk.domain.balances.balances_container import BalancesContainer
    from bkper_sdk.domain.balances.payloads import BalancePayload


class Balance:
    """One date bucket of a BalancesContainer.

    Values are raw as stored by the service: not rounded and not adjusted
    for the container nature.
    """

    def __init__(self, container: BalancesContainer, payload: BalancePayload):
        self._container = container
        self._payload = payload

    @property
    def container(self) -> BalancesContainer:
        return self._container

    @property
    def fuzzy_date(self) -> int:
        """YYYYMMDD; month and day are zero for coarser periodicities.

        20180125 - 25 January 2018 (DAILY), 20180100 - January 2018
        (MONTHLY), 20180000 - 2018 (YEARLY).
        """
        return self._payload.fuzzy_date

    @property
    def day(self) -> int:
        return self._payload.day

    @property
    def month(self) -> int:
        return self._payload.month

    @property
    def year(self) -> int:
        return self._payload.year

    @property
    def date(self) -> date:
        return fuzzy_date_to_date(self.fuzzy_date)

    @property
    def period_balance(self) -> Decimal:
        return self._payload.period_balance

    @property
    def cumulative_balance(self) -> Decimal:
        return self._payload.cumulative_balance

    @property
    def checked_period_balance(self) -> Decimal:
        return self._payload.checked_period_balance

    @property
    def checked_cumulative_balance(self) -> Decimal:
        return self._payload.checked_cumulative_balance

    @property
    def unchecked_period_balance(self) -> Decimal:
        return self._payload.unchecked_period_balance

    @property
    def unchecked_cumulative_balance(self) -> Decimal:
        return self._payload.unchecked_cumulative_balance

    def __repr__(self) -> str:
        return (
            f"Balance(container={self._container.name!r}, "
            f"fuzzy_date={self.fuzzy_date})"
        )
