"""Value objects for the ledger domain."""

from bkper_sdk.domain.ledger.value_objects.balance_type import (
    BalanceCheckedType,
    BalanceType,
)
from bkper_sdk.domain.ledger.value_objects.book_format import (
    BookFormat,
    DecimalSeparator,
)
from bkper_sdk.domain.ledger.value_objects.fuzzy_date import (
    fuzzy_date_for,
    fuzzy_date_to_date,
    make_fuzzy_date,
    split_fuzzy_date,
)
from bkper_sdk.domain.ledger.value_objects.periodicity import Periodicity
from bkper_sdk.domain.ledger.value_objects.transaction_record import (
    AccountRef,
    FileRef,
    TransactionRecord,
)
from bkper_sdk.domain.ledger.value_objects.wire_decimal import parse_wire_decimal

__all__ = [
    "AccountRef",
    "BalanceCheckedType",
    "BalanceType",
    "BookFormat",
    "DecimalSeparator",
    "FileRef",
    "Periodicity",
    "TransactionRecord",
    "fuzzy_date_for",
    "fuzzy_date_to_date",
    "make_fuzzy_date",
    "parse_wire_decimal",
    "split_fuzzy_date",
]
