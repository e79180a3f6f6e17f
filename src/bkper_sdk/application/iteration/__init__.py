"""Paged transaction iteration with resumable continuation tokens."""

from bkper_sdk.application.iteration.continuation_token import (
    DELIMITER,
    NULL_CURSOR,
    ContinuationToken,
)
from bkper_sdk.application.iteration.transaction_iterator import TransactionIterator
from bkper_sdk.application.iteration.transaction_page import (
    DEFAULT_PAGE_SIZE,
    TransactionPage,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DELIMITER",
    "NULL_CURSOR",
    "ContinuationToken",
    "TransactionIterator",
    "TransactionPage",
]
