"""Flatten balances containers into a two-dimensional table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Sequence, Union

from bkper_sdk.domain.balances.balances_container import (
    balance_attribute,
    representative_value,
)
from bkper_sdk.domain.ledger.value_objects import (
    BalanceCheckedType,
    BalanceType,
    BookFormat,
    Periodicity,
)

if TYPE_CHECKING:
    from bkper_sdk.domain.balances.balances_container import BalancesContainer

logger = logging.getLogger(__name__)

Cell = Union[str, int, Decimal, None]
Matrix = list[list[Cell]]


def pad_matrix(matrix: Matrix) -> Matrix:
    """Right-pad every row with None up to the longest row."""
    width = max((len(row) for row in matrix), default=0)
    return [row + [None] * (width - len(row)) for row in matrix]


def transpose_matrix(matrix: Matrix) -> Matrix:
    """Swap rows and columns of a rectangular matrix."""
    padded = pad_matrix(matrix)
    if not padded:
        return []
    return [list(column) for column in zip(*padded)]


@dataclass(frozen=True)
class _Column:
    """One rendered unit: a container plus the nature that signs its values.

    Expanded leaves are signed with the nature of the group they came from,
    so their values add up to the group total.
    """

    container: BalancesContainer
    credit: bool

    @property
    def name(self) -> str:
        return self.container.name


class BalancesDataTableBuilder:
    """Set up and build two-dimensional arrays of balances.

    For TOTAL, one ``[name, balance]`` row per container::

        | Name     | Balance |
        | Expenses | 4568.23 |
        | Income   | 5678.93 |

    For PERIOD or CUMULATIVE, a time table with a date column and one column
    per container::

        | Date       | Expenses | Income  |
        | 15/01/2014 | 2345.23  | 3452.93 |
        | 15/02/2014 | 2345.93  | 3456.46 |

    Options are applied left to right; ``build()`` produces the table in
    untransposed orientation first and transposes it as a last step.
    """

    NAME_HEADER = "Name"
    BALANCE_HEADER = "Balance"
    DATE_HEADER = "Date"

    def __init__(
        self,
        book_format: BookFormat,
        balances_containers: Sequence[BalancesContainer],
        periodicity: Periodicity = Periodicity.DAILY,
        balance_checked_type: BalanceCheckedType = BalanceCheckedType.FULL_BALANCE,
    ):
        self._book_format = book_format
        self._containers = list(balances_containers)
        self._periodicity = periodicity
        self._balance_checked_type = balance_checked_type
        self._balance_type = BalanceType.TOTAL
        self._should_format_dates = False
        self._should_format_values = False
        self._should_expand = False
        self._should_transpose = False
        self._should_hide_dates = False
        self._should_hide_names = False

    # -------------------------------------------------------------------------
    # Fluent options
    # -------------------------------------------------------------------------

    def format_dates(self, should_format: bool = True) -> BalancesDataTableBuilder:
        """Render dates with the book date pattern, trimmed to periodicity."""
        self._should_format_dates = should_format
        return self

    def format_values(self, should_format: bool = True) -> BalancesDataTableBuilder:
        """Render values as text with the book decimal separator."""
        self._should_format_values = should_format
        return self

    def expanded(self, expanded: bool = True) -> BalancesDataTableBuilder:
        """Replace each group by its descendant accounts."""
        self._should_expand = expanded
        return self

    def type(self, balance_type: BalanceType) -> BalancesDataTableBuilder:
        self._balance_type = BalanceType(balance_type)
        return self

    def transposed(self, transposed: bool = True) -> BalancesDataTableBuilder:
        self._should_transpose = transposed
        return self

    def hide_dates(self, hide: bool = True) -> BalancesDataTableBuilder:
        """Drop the date column of PERIOD and CUMULATIVE tables."""
        self._should_hide_dates = hide
        return self

    def hide_names(self, hide: bool = True) -> BalancesDataTableBuilder:
        """Drop the header row holding the names."""
        self._should_hide_names = hide
        return self

    def balance_checked_type(
        self,
        checked_type: BalanceCheckedType,
    ) -> BalancesDataTableBuilder:
        self._balance_checked_type = BalanceCheckedType(checked_type)
        return self

    @property
    def book_format(self) -> BookFormat:
        return self._book_format

    def has_header_row(self) -> bool:
        """Whether the first row of ``build()`` holds labels rather than values.

        Untransposed, that is the names row. Transposed, the first row is the
        former first column: container names for TOTAL, dates otherwise.
        """
        if not self._should_transpose:
            return not self._should_hide_names
        if self._balance_type.is_time_series():
            return not self._should_hide_dates
        return True

    # -------------------------------------------------------------------------
    # Build
    # -------------------------------------------------------------------------

    def build(self) -> Matrix:
        if self._balance_type.is_time_series():
            table = self._build_time_table()
        else:
            table = self._build_total_table()

        table = pad_matrix(table)
        if self._should_transpose:
            table = transpose_matrix(table)

        logger.debug(
            "Built %s balances table: %d rows x %d columns",
            self._balance_type.value,
            len(table),
            len(table[0]) if table else 0,
        )
        return table

    def _build_total_table(self) -> Matrix:
        table: Matrix = []
        if not self._should_hide_names:
            table.append([self.NAME_HEADER, self.BALANCE_HEADER])

        for column in self._columns():
            raw = column.container.raw_balance(
                cumulative=True,
                checked_type=self._balance_checked_type,
            )
            table.append([column.name, self._render_value(raw, column.credit)])
        return table

    def _build_time_table(self) -> Matrix:
        columns = self._columns()
        cumulative = self._balance_type == BalanceType.CUMULATIVE
        attribute = balance_attribute(cumulative, self._balance_checked_type)

        fuzzy_dates: set[int] = set()
        for column in columns:
            fuzzy_dates.update(b.fuzzy_date for b in column.container.get_balances())

        table: Matrix = []
        header: list[Cell] = [] if self._should_hide_dates else [self.DATE_HEADER]
        header.extend(column.name for column in columns)
        if not self._should_hide_names and header:
            table.append(header)

        for fuzzy_date in sorted(fuzzy_dates):
            row: list[Cell] = []
            if not self._should_hide_dates:
                row.append(self._render_date(fuzzy_date))
            for column in columns:
                balance = column.container.get_balance(fuzzy_date)
                if balance is None:
                    row.append(None)
                else:
                    raw = getattr(balance, attribute)
                    row.append(self._render_value(raw, column.credit))
            table.append(row)
        return table

    def _columns(self) -> list[_Column]:
        columns: list[_Column] = []
        for container in self._containers:
            leaves = container.leaf_accounts() if container.is_group else []
            if self._should_expand and leaves:
                columns.extend(_Column(leaf, container.is_credit) for leaf in leaves)
            else:
                columns.append(_Column(container, container.is_credit))
        return columns

    def _render_value(self, raw: Decimal, credit: bool) -> Cell:
        value = representative_value(self._book_format.round(raw), credit)
        if self._should_format_values:
            return self._book_format.format_value(value)
        return value

    def _render_date(self, fuzzy_date: int) -> Cell:
        if self._should_format_dates:
            return self._book_format.format_fuzzy_date(fuzzy_date, self._periodicity)
        return fuzzy_date
