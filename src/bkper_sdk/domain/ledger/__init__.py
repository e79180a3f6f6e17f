"""Ledger domain: transactions, book formatting and remote service ports."""

from bkper_sdk.domain.ledger.exceptions import (
    BookNotFoundError,
    InvalidContinuationTokenError,
    InvalidFuzzyDateError,
    RemoteAuthorizationError,
    RemoteFetchError,
)

__all__ = [
    "BookNotFoundError",
    "InvalidContinuationTokenError",
    "InvalidFuzzyDateError",
    "RemoteAuthorizationError",
    "RemoteFetchError",
]
