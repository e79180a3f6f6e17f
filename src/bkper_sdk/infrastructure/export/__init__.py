"""Export of built tables to spreadsheet formats."""

from bkper_sdk.infrastructure.export.excel_table_writer import (
    ExcelTableStyles,
    ExcelTableWriter,
)

__all__ = ["ExcelTableStyles", "ExcelTableWriter"]
