"""Unit tests for BalancesDataTableBuilder."""

from decimal import Decimal

import pytest

from bkper_sdk.domain.balances import BalancesReport
from bkper_sdk.domain.balances.services import (
    BalancesDataTableBuilder,
    pad_matrix,
    transpose_matrix,
)
from bkper_sdk.domain.ledger.value_objects import (
    BalanceCheckedType,
    BalanceType,
    BookFormat,
    DecimalSeparator,
)
from tests.shared.fixtures.factories import BalancesJsonFactory as F


@pytest.fixture
def report():
    return BalancesReport.from_json(F.assets_group())


def all_layouts():
    for balance_type in BalanceType:
        for expanded in (False, True):
            for hide_names in (False, True):
                for hide_dates in (False, True):
                    yield balance_type, expanded, hide_names, hide_dates


class TestTotalTable:
    def test_cash_and_loans(self):
        report = BalancesReport.from_json(F.cash_and_loans())

        matrix = report.create_data_table().build()

        assert matrix == [
            ["Name", "Balance"],
            ["Cash", Decimal("100.50")],
            ["Loans", Decimal("50.25")],
        ]

    def test_hide_names_drops_header(self):
        report = BalancesReport.from_json(F.cash_and_loans())

        matrix = report.create_data_table().hide_names().build()

        assert matrix == [["Cash", Decimal("100.50")], ["Loans", Decimal("50.25")]]

    def test_format_values_renders_text(self):
        book_format = BookFormat(decimal_separator=DecimalSeparator.COMMA)
        report = BalancesReport.from_json(F.cash_and_loans(), book_format)

        matrix = report.create_data_table().format_values().build()

        assert matrix[1:] == [["Cash", "100,50"], ["Loans", "50,25"]]

    def test_format_values_can_be_switched_off(self):
        report = BalancesReport.from_json(F.cash_and_loans())

        matrix = (
            report.create_data_table()
            .format_values()
            .format_values(should_format=False)
            .build()
        )

        assert matrix[1] == ["Cash", Decimal("100.50")]

    def test_groups_aggregate_by_default(self, report):
        matrix = report.create_data_table().build()

        assert matrix == [
            ["Name", "Balance"],
            ["Assets", Decimal("350.75")],
            ["Revenue", Decimal("1000.00")],
        ]

    def test_expanded_replaces_groups_with_leaf_accounts(self, report):
        matrix = report.create_data_table().expanded().build()

        assert matrix == [
            ["Name", "Balance"],
            ["Bank", Decimal("300.50")],
            ["Cash", Decimal("50.25")],
            ["Revenue", Decimal("1000.00")],
        ]

    def test_container_without_balances_contributes_zero(self):
        report = BalancesReport.from_json(F.report(accounts=[{"name": "Empty"}]))

        matrix = report.create_data_table().build()

        assert matrix[1] == ["Empty", Decimal("0")]

    def test_empty_group_expands_to_its_aggregate_row(self):
        report = BalancesReport.from_json(F.report(groups=[F.group("G", "5.00")]))

        matrix = report.create_data_table().expanded().build()

        assert matrix[1:] == [["G", Decimal("5.00")]]

    @pytest.mark.parametrize(
        ("checked_type", "expected"),
        [
            (BalanceCheckedType.CHECKED_BALANCE, [Decimal("100.50"), Decimal("50.25")]),
            (BalanceCheckedType.UNCHECKED_BALANCE, [Decimal("0"), Decimal("0")]),
        ],
    )
    def test_balance_checked_type_selects_variant(self, checked_type, expected):
        report = BalancesReport.from_json(F.cash_and_loans())

        matrix = report.create_data_table().balance_checked_type(checked_type).build()

        assert [row[1] for row in matrix[1:]] == expected


class TestExpansionConservation:
    @pytest.mark.parametrize(
        "group",
        [
            F.group(
                "Liabilities",
                "-50.25",
                accounts=[
                    F.account("Loan A", "-30.10", credit=True),
                    F.account("Loan B", "-20.15", credit=True),
                ],
            ),
            F.group(
                "Net",
                "60.00",
                accounts=[
                    F.account("Bank", "100.00"),
                    F.account("Card", "-40.00", credit=True),
                ],
            ),
            F.group(
                "Nested",
                "12.34",
                groups=[
                    F.group("Inner", "10.00", accounts=[F.account("X", "10.00")]),
                ],
                accounts=[F.account("Y", "2.34")],
            ),
        ],
    )
    def test_leaf_rows_sum_to_group_total(self, group):
        report = BalancesReport.from_json(F.report(groups=[group]))
        container = report.get_balances_containers()[0]

        rows = report.create_data_table().expanded().hide_names().build()

        assert sum(row[1] for row in rows) == container.get_cumulative_balance()


class TestTimeTable:
    def test_period_table(self, report):
        matrix = report.create_data_table().type(BalanceType.PERIOD).build()

        assert matrix == [
            ["Date", "Assets", "Revenue"],
            [20240100, Decimal("100.25"), Decimal("400.00")],
            [20240200, Decimal("250.50"), None],
            [20240300, None, Decimal("600.00")],
        ]

    def test_cumulative_table(self, report):
        matrix = report.create_data_table().type(BalanceType.CUMULATIVE).build()

        assert matrix == [
            ["Date", "Assets", "Revenue"],
            [20240100, Decimal("100.25"), Decimal("400.00")],
            [20240200, Decimal("350.75"), None],
            [20240300, None, Decimal("1000.00")],
        ]

    def test_expanded_period_table(self, report):
        matrix = (
            report.create_data_table().type(BalanceType.PERIOD).expanded().build()
        )

        assert matrix == [
            ["Date", "Bank", "Cash", "Revenue"],
            [20240100, Decimal("100.25"), None, Decimal("400.00")],
            [20240200, Decimal("200.25"), Decimal("50.25"), None],
            [20240300, None, None, Decimal("600.00")],
        ]

    def test_format_dates_follows_periodicity(self, report):
        matrix = (
            report.create_data_table().type(BalanceType.PERIOD).format_dates().build()
        )

        assert [row[0] for row in matrix[1:]] == ["01/2024", "02/2024", "03/2024"]

    def test_hide_dates_drops_date_column(self, report):
        builder = report.create_data_table().type(BalanceType.PERIOD)

        matrix = builder.hide_dates().build()

        assert matrix[0] == ["Assets", "Revenue"]
        assert matrix[1] == [Decimal("100.25"), Decimal("400.00")]

    def test_hide_names_drops_header_row(self, report):
        builder = report.create_data_table().type(BalanceType.PERIOD)

        matrix = builder.hide_names().build()

        assert matrix[0][0] == 20240100
        assert len(matrix) == 3

    def test_transposed(self, report):
        matrix = (
            report.create_data_table().type(BalanceType.PERIOD).transposed().build()
        )

        assert matrix == [
            ["Date", 20240100, 20240200, 20240300],
            ["Assets", Decimal("100.25"), Decimal("250.50"), None],
            ["Revenue", Decimal("400.00"), None, Decimal("600.00")],
        ]

    def test_group_table_renders_children(self, report):
        assets = report.get_balances_container("Assets")

        matrix = assets.create_data_table().type(BalanceType.CUMULATIVE).build()

        assert matrix[0] == ["Date", "Bank", "Cash"]


class TestEmptyInput:
    def test_total_without_containers_is_header_only(self):
        builder = BalancesDataTableBuilder(BookFormat(), [])

        assert builder.build() == [["Name", "Balance"]]

    def test_total_without_containers_and_names_is_empty(self):
        builder = BalancesDataTableBuilder(BookFormat(), []).hide_names()

        assert builder.build() == []

    def test_time_table_without_containers(self):
        builder = BalancesDataTableBuilder(BookFormat(), []).type(BalanceType.PERIOD)

        assert builder.build() == [["Date"]]
        assert builder.hide_dates().build() == []


class TestMatrixShape:
    @pytest.mark.parametrize(
        ("balance_type", "expanded", "hide_names", "hide_dates"),
        list(all_layouts()),
    )
    def test_double_transpose_is_identity(
        self, report, balance_type, expanded, hide_names, hide_dates
    ):
        def builder():
            return (
                report.create_data_table()
                .type(balance_type)
                .expanded(expanded)
                .hide_names(hide_names)
                .hide_dates(hide_dates)
            )

        plain = builder().build()
        transposed = builder().transposed().build()

        assert transpose_matrix(transposed) == plain

    @pytest.mark.parametrize(
        ("balance_type", "expanded", "hide_names", "hide_dates"),
        list(all_layouts()),
    )
    def test_rows_have_equal_length(
        self, report, balance_type, expanded, hide_names, hide_dates
    ):
        for transposed in (False, True):
            matrix = (
                report.create_data_table()
                .type(balance_type)
                .expanded(expanded)
                .hide_names(hide_names)
                .hide_dates(hide_dates)
                .transposed(transposed)
                .build()
            )

            assert len({len(row) for row in matrix}) <= 1

    def test_pad_matrix_right_pads_with_none(self):
        assert pad_matrix([[1], [1, 2, 3], []]) == [
            [1, None, None],
            [1, 2, 3],
            [None, None, None],
        ]

    def test_transpose_empty_matrix(self):
        assert transpose_matrix([]) == []


class TestHeaderRow:
    @pytest.mark.parametrize(
        ("balance_type", "transposed", "hide_names", "hide_dates", "expected"),
        [
            (BalanceType.TOTAL, False, False, False, True),
            (BalanceType.TOTAL, False, True, False, False),
            (BalanceType.TOTAL, True, True, False, True),
            (BalanceType.PERIOD, False, False, True, True),
            (BalanceType.PERIOD, False, True, False, False),
            (BalanceType.PERIOD, True, True, False, True),
            (BalanceType.PERIOD, True, False, True, False),
        ],
    )
    def test_has_header_row_follows_layout(
        self, report, balance_type, transposed, hide_names, hide_dates, expected
    ):
        builder = (
            report.create_data_table()
            .type(balance_type)
            .transposed(transposed)
            .hide_names(hide_names)
            .hide_dates(hide_dates)
        )

        assert builder.has_header_row() is expected

    def test_transposed_time_table_without_dates_starts_with_values(self, report):
        builder = (
            report.create_data_table()
            .type(BalanceType.PERIOD)
            .transposed()
            .hide_dates()
        )

        first_row = builder.build()[0]

        assert first_row == ["Assets", Decimal("100.25"), Decimal("250.50"), None]
        assert builder.has_header_row() is False
