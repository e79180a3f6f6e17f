"""Unit tests for ExcelTableWriter."""

from decimal import Decimal
from io import BytesIO

from openpyxl import load_workbook

from bkper_sdk.infrastructure.export import ExcelTableWriter


def read_sheet(content: bytes):
    return load_workbook(BytesIO(content)).active


class TestExcelTableWriter:
    def test_writes_matrix_cells(self):
        matrix = [
            ["Name", "Balance"],
            ["Cash", Decimal("100.50")],
            ["Loans", None],
        ]

        ws = read_sheet(ExcelTableWriter().write(matrix, title="Totals"))

        assert ws.title == "Totals"
        assert ws["A1"].value == "Name"
        assert ws["A2"].value == "Cash"
        assert ws["B2"].value == 100.5
        assert ws["B2"].number_format == "#,##0.00"
        assert ws["B3"].value is None

    def test_header_row_is_styled_and_frozen(self):
        matrix = [["Date", "Cash"], [20240100, Decimal("1")]]

        ws = read_sheet(ExcelTableWriter().write(matrix))

        assert ws["A1"].font.bold is True
        assert ws["A2"].font.bold is not True
        assert ws.freeze_panes == "A2"

    def test_headerless_matrix(self):
        ws = read_sheet(ExcelTableWriter().write([["Cash", "1,00"]], header=False))

        assert ws["A1"].font.bold is not True
        assert ws["B1"].value == "1,00"

    def test_number_format_follows_fraction_digits(self):
        content = ExcelTableWriter(fraction_digits=0).write([["X", Decimal("3")]])

        assert read_sheet(content)["B1"].number_format == "#,##0"

    def test_sheet_title_is_sanitized(self):
        title = "Assets/Liabilities: [2024] and more"

        content = ExcelTableWriter().write([], title=title)

        sheet_title = read_sheet(content).title
        assert "/" not in sheet_title
        assert ":" not in sheet_title
        assert len(sheet_title) <= 31

    def test_empty_matrix_produces_workbook(self):
        content = ExcelTableWriter().write([])

        assert content[:2] == b"PK"
