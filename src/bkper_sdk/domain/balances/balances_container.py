"""Balances containers: the account leaves and group nodes of a report."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

from bkper_sdk.domain.balances.balance import Balance
from bkper_sdk.domain.ledger.value_objects import BalanceCheckedType, BookFormat

if TYPE_CHECKING:
    from bkper_sdk.domain.balances.balances_report import BalancesReport
    from bkper_sdk.domain.balances.payloads import (
        AccountBalancesPayload,
        BalancePayload,
        GroupBalancesPayload,
    )
    from bkper_sdk.domain.balances.services import BalancesDataTableBuilder

_CHECKED_PREFIX = {
    BalanceCheckedType.FULL_BALANCE: "",
    BalanceCheckedType.CHECKED_BALANCE: "checked_",
    BalanceCheckedType.UNCHECKED_BALANCE: "unchecked_",
}


def balance_attribute(
    cumulative: bool,
    checked_type: BalanceCheckedType = BalanceCheckedType.FULL_BALANCE,
) -> str:
    """Attribute name of a balance kind on payloads and Balance objects."""
    kind = "cumulative_balance" if cumulative else "period_balance"
    return _CHECKED_PREFIX[checked_type] + kind


def representative_value(value: Decimal, credit: bool) -> Decimal:
    """Flip the stored sign for credit-nature containers.

    Stored balances are debit-positive; revenue and liabilities display
    positive when credited.
    """
    return -value if credit else value


class BalancesContainer(ABC):
    """Container of balances of an account or a group.

    Composed of the date buckets for the queried window of time plus the
    period and cumulative totals. Read-only after construction.
    """

    def __init__(
        self,
        balances_report: BalancesReport,
        payload: AccountBalancesPayload | GroupBalancesPayload,
        parent: GroupBalancesContainer | None = None,
    ):
        self._balances_report = balances_report
        self._payload = payload
        self._parent = parent
        self._balances: list[Balance] | None = None
        self._balances_by_date: dict[int, Balance] | None = None

    @property
    def balances_report(self) -> BalancesReport:
        return self._balances_report

    @property
    def parent(self) -> GroupBalancesContainer | None:
        return self._parent

    @property
    def name(self) -> str:
        return self._payload.name

    @property
    @abstractmethod
    def is_credit(self) -> bool:
        """Credit nature of the account or group this container represents."""

    @property
    def is_group(self) -> bool:
        return False

    @property
    def book_format(self) -> BookFormat:
        return self._balances_report.book_format

    # -------------------------------------------------------------------------
    # Date buckets
    # -------------------------------------------------------------------------

    def get_balances(self) -> list[Balance]:
        if self._balances is None:
            self._balances = [
                Balance(self, balance_payload)
                for balance_payload in self._balance_payloads()
            ]
        return list(self._balances)

    def get_balance(self, fuzzy_date: int) -> Balance | None:
        """Bucket for a fuzzy date, None when the date was not measured."""
        if self._balances_by_date is None:
            self._balances_by_date = {b.fuzzy_date: b for b in self.get_balances()}
        return self._balances_by_date.get(fuzzy_date)

    def _balance_payloads(self) -> list[BalancePayload]:
        return self._payload.balances

    # -------------------------------------------------------------------------
    # Representative totals
    # -------------------------------------------------------------------------

    def raw_balance(
        self,
        cumulative: bool = True,
        checked_type: BalanceCheckedType = BalanceCheckedType.FULL_BALANCE,
    ) -> Decimal:
        return getattr(self._payload, balance_attribute(cumulative, checked_type))

    def get_representative_balance(
        self,
        cumulative: bool = True,
        checked_type: BalanceCheckedType = BalanceCheckedType.FULL_BALANCE,
    ) -> Decimal:
        """Rounded to the book precision, then signed by the container nature."""
        rounded = self.book_format.round(self.raw_balance(cumulative, checked_type))
        return representative_value(rounded, self.is_credit)

    def get_cumulative_balance(self) -> Decimal:
        """Cumulative balance to the date, since the first posted transaction."""
        return self.get_representative_balance(cumulative=True)

    def get_checked_cumulative_balance(self) -> Decimal:
        return self.get_representative_balance(
            True, BalanceCheckedType.CHECKED_BALANCE
        )

    def get_unchecked_cumulative_balance(self) -> Decimal:
        return self.get_representative_balance(
            True, BalanceCheckedType.UNCHECKED_BALANCE
        )

    def get_period_balance(self) -> Decimal:
        """Balance on the date period."""
        return self.get_representative_balance(cumulative=False)

    def get_checked_period_balance(self) -> Decimal:
        return self.get_representative_balance(
            False, BalanceCheckedType.CHECKED_BALANCE
        )

    def get_unchecked_period_balance(self) -> Decimal:
        return self.get_representative_balance(
            False, BalanceCheckedType.UNCHECKED_BALANCE
        )

    def get_cumulative_balance_text(self) -> str:
        return self.book_format.format_value(self.get_cumulative_balance())

    def get_checked_cumulative_balance_text(self) -> str:
        return self.book_format.format_value(self.get_checked_cumulative_balance())

    def get_unchecked_cumulative_balance_text(self) -> str:
        return self.book_format.format_value(self.get_unchecked_cumulative_balance())

    def get_period_balance_text(self) -> str:
        return self.book_format.format_value(self.get_period_balance())

    def get_checked_period_balance_text(self) -> str:
        return self.book_format.format_value(self.get_checked_period_balance())

    def get_unchecked_period_balance_text(self) -> str:
        return self.book_format.format_value(self.get_unchecked_period_balance())

    # -------------------------------------------------------------------------
    # Tree navigation
    # -------------------------------------------------------------------------

    def get_balances_containers(self) -> list[BalancesContainer]:
        """Direct children. Accounts have none."""
        return []

    def get_balances_container(self, name: str) -> BalancesContainer | None:
        """Direct child with the given name. Not recursive."""
        for container in self.get_balances_containers():
            if container.name == name:
                return container
        return None

    @abstractmethod
    def leaf_accounts(self) -> list[AccountBalancesContainer]:
        """All account containers under this node, depth first."""

    @abstractmethod
    def create_data_table(self) -> BalancesDataTableBuilder:
        """Builder over this container, or over its children for groups."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class AccountBalancesContainer(BalancesContainer):
    """Leaf container of a single account."""

    _payload: AccountBalancesPayload

    @property
    def is_credit(self) -> bool:
        return self._payload.credit

    def leaf_accounts(self) -> list[AccountBalancesContainer]:
        return [self]

    def create_data_table(self) -> BalancesDataTableBuilder:
        from bkper_sdk.domain.balances.services import BalancesDataTableBuilder

        report = self._balances_report
        return BalancesDataTableBuilder(
            report.book_format,
            [self],
            report.periodicity,
            report.balance_checked_type,
        )


class GroupBalancesContainer(BalancesContainer):
    """Group node; nests the containers of its child groups and accounts."""

    _payload: GroupBalancesPayload

    def __init__(
        self,
        balances_report: BalancesReport,
        payload: GroupBalancesPayload,
        parent: GroupBalancesContainer | None = None,
    ):
        super().__init__(balances_report, payload, parent)
        self._children: list[BalancesContainer] | None = None

    @property
    def is_group(self) -> bool:
        return True

    @property
    def is_credit(self) -> bool:
        """Credit only when every descendant account is credit.

        The flag sent by the service wins when present.
        """
        if self._payload.credit is not None:
            return self._payload.credit
        leaves = self.leaf_accounts()
        return bool(leaves) and all(leaf.is_credit for leaf in leaves)

    def get_balances_containers(self) -> list[BalancesContainer]:
        if self._children is None:
            children: list[BalancesContainer] = [
                GroupBalancesContainer(self._balances_report, group, self)
                for group in self._payload.group_balances
            ]
            children.extend(
                AccountBalancesContainer(self._balances_report, account, self)
                for account in self._payload.account_balances
            )
            self._children = children
        return list(self._children)

    def leaf_accounts(self) -> list[AccountBalancesContainer]:
        leaves: list[AccountBalancesContainer] = []
        for child in self.get_balances_containers():
            leaves.extend(child.leaf_accounts())
        return leaves

    def create_data_table(self) -> BalancesDataTableBuilder:
        from bkper_sdk.domain.balances.services import BalancesDataTableBuilder

        report = self._balances_report
        return BalancesDataTableBuilder(
            report.book_format,
            self.get_balances_containers(),
            report.periodicity,
            report.balance_checked_type,
        )
