"""Excel table writer - renders built balance matrices as xlsx."""

import re
from decimal import Decimal
from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from bkper_sdk.domain.balances.services import Cell, Matrix

# Excel rejects these in sheet titles and caps them at 31 characters
_INVALID_TITLE_CHARS = re.compile(r"[\[\]:*?/\\]")
_MAX_TITLE_LENGTH = 31


class ExcelTableStyles:
    """Style definitions for exported tables."""

    HEADER_BG = "1E3A5F"
    HEADER_FG = "FFFFFF"

    HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=HEADER_FG)
    BODY_FONT = Font(name="Calibri", size=10)
    HEADER_FILL = PatternFill(
        start_color=HEADER_BG,
        end_color=HEADER_BG,
        fill_type="solid",
    )
    LEFT = Alignment(horizontal="left", vertical="center")
    RIGHT = Alignment(horizontal="right", vertical="center")


class ExcelTableWriter:
    """Writes one matrix from ``BalancesDataTableBuilder.build()`` per workbook.

    Decimal cells become numbers with the given number of fraction digits;
    text and raw fuzzy dates are written as they are. The first row is
    styled as a header unless ``header`` is False (e.g. ``hide_names``).
    """

    def __init__(self, fraction_digits: int = 2):
        self._styles = ExcelTableStyles()
        decimals = "." + "0" * fraction_digits if fraction_digits else ""
        self._number_format = f"#,##0{decimals}"

    def write(
        self,
        matrix: Matrix,
        title: str = "Balances",
        header: bool = True,
    ) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = self._sheet_title(title)

        for row_index, row in enumerate(matrix, start=1):
            is_header = header and row_index == 1
            for col_index, value in enumerate(row, start=1):
                self._write_cell(ws, row_index, col_index, value, is_header)

        if header and matrix:
            ws.freeze_panes = "A2"
        self._set_column_widths(ws, matrix)

        output = BytesIO()
        wb.save(output)
        output.seek(0)
        return output.getvalue()

    def _write_cell(
        self,
        ws: Worksheet,
        row: int,
        column: int,
        value: Cell,
        is_header: bool,
    ) -> None:
        if isinstance(value, Decimal):
            cell = ws.cell(row=row, column=column, value=float(value))
            cell.number_format = self._number_format
            cell.alignment = self._styles.RIGHT
        else:
            cell = ws.cell(row=row, column=column, value=value)
            cell.alignment = self._styles.LEFT

        if is_header:
            cell.font = self._styles.HEADER_FONT
            cell.fill = self._styles.HEADER_FILL
        else:
            cell.font = self._styles.BODY_FONT

    def _set_column_widths(self, ws: Worksheet, matrix: Matrix) -> None:
        widths: dict[int, int] = {}
        for row in matrix:
            for col_index, value in enumerate(row, start=1):
                length = len(str(value)) if value is not None else 0
                widths[col_index] = max(widths.get(col_index, 10), length + 2)
        for col_index, width in widths.items():
            ws.column_dimensions[get_column_letter(col_index)].width = min(width, 50)

    @staticmethod
    def _sheet_title(title: str) -> str:
        cleaned = _INVALID_TITLE_CHARS.sub(" ", title).strip()
        return cleaned[:_MAX_TITLE_LENGTH] or "Balances"
