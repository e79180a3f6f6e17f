"""Balances report: the containers returned by one balances query."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bkper_sdk.domain.balances.balances_container import (
    AccountBalancesContainer,
    BalancesContainer,
    GroupBalancesContainer,
)
from bkper_sdk.domain.balances.payloads import BalancesPayload
from bkper_sdk.domain.ledger.value_objects import (
    BalanceCheckedType,
    BookFormat,
    Periodicity,
)

if TYPE_CHECKING:
    from bkper_sdk.domain.balances.services import BalancesDataTableBuilder


class BalancesReport:
    """Root collection of the top-level containers of one query.

    Carries the periodicity and checked filter needed to interpret the
    fuzzy dates of the buckets. No remote calls happen after construction.
    """

    def __init__(self, payload: BalancesPayload, book_format: BookFormat):
        self._payload = payload
        self._book_format = book_format
        self._containers: list[BalancesContainer] | None = None

    @classmethod
    def from_json(
        cls,
        data: dict[str, Any] | None,
        book_format: BookFormat | None = None,
    ) -> BalancesReport:
        payload = BalancesPayload.model_validate(data or {})
        return cls(payload, book_format or BookFormat())

    @property
    def book_format(self) -> BookFormat:
        return self._book_format

    @property
    def periodicity(self) -> Periodicity:
        return self._payload.periodicity

    @property
    def balance_checked_type(self) -> BalanceCheckedType:
        return self._payload.balance_checked_type

    def get_balances_containers(self) -> list[BalancesContainer]:
        """Top-level containers: groups first, then accounts."""
        if self._containers is None:
            containers: list[BalancesContainer] = [
                GroupBalancesContainer(self, group)
                for group in self._payload.group_balances
            ]
            containers.extend(
                AccountBalancesContainer(self, account)
                for account in self._payload.account_balances
            )
            self._containers = containers
        return list(self._containers)

    def get_balances_container(self, name: str) -> BalancesContainer | None:
        """Top-level container by account name, group name or #hashtag."""
        for container in self.get_balances_containers():
            if container.name == name:
                return container
        return None

    def has_only_one_group(self) -> bool:
        """True when the query matched exactly one group and nothing else."""
        return (
            len(self._payload.group_balances) == 1
            and not self._payload.account_balances
        )

    def create_data_table(self) -> BalancesDataTableBuilder:
        from bkper_sdk.domain.balances.services import BalancesDataTableBuilder

        return BalancesDataTableBuilder(
            self._book_format,
            self.get_balances_containers(),
            self.periodicity,
            self.balance_checked_type,
        )

    def __repr__(self) -> str:
        return (
            f"BalancesReport(periodicity={self.periodicity.value!r}, "
            f"containers={len(self.get_balances_containers())})"
        )
