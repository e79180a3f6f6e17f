"""Pure in-memory services over the balances tree."""

from bkper_sdk.domain.balances.services.balances_data_table_builder import (
    BalancesDataTableBuilder,
    Cell,
    Matrix,
    pad_matrix,
    transpose_matrix,
)

__all__ = [
    "BalancesDataTableBuilder",
    "Cell",
    "Matrix",
    "pad_matrix",
    "transpose_matrix",
]
