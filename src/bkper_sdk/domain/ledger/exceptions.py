"""Ledger domain exceptions.

These exceptions cover the remote bookkeeping service as seen from the
client: failed fetches and continuation tokens that cannot be decoded.
"""

from typing import Any

from bkper_sdk.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

# =============================================================================
# Remote Exceptions
# =============================================================================


class RemoteFetchError(DomainException):
    """Raised when a page or balance fetch against the remote service fails.

    Covers network errors, timeouts and non-2xx responses. Retries are the
    transport's concern; the iteration and report layers let this
    propagate unchanged.
    """

    def __init__(
        self,
        message: str = "Failed to fetch data from the remote service",
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        merged = {"status_code": status_code, **(details or {})}
        super().__init__(
            message=message,
            code=ErrorCode.REMOTE_FETCH_FAILED,
            details=merged,
        )
        self.status_code = status_code


class RemoteAuthorizationError(RemoteFetchError):
    """Raised when the remote service rejects the credentials (401/403)."""

    def __init__(
        self,
        message: str = "The remote service rejected the request credentials",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, status_code=status_code)
        self.code = ErrorCode.REMOTE_UNAUTHORIZED


class BookNotFoundError(EntityNotFoundError):
    """Raised when the configured book does not exist or is not shared."""

    def __init__(self, book_id: str) -> None:
        super().__init__(
            message=f"Book '{book_id}' not found",
            code=ErrorCode.BOOK_NOT_FOUND,
            details={"book_id": book_id},
        )


# =============================================================================
# Validation Exceptions
# =============================================================================


class InvalidContinuationTokenError(ValidationError):
    """Raised when a continuation token cannot be decoded."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(
            message=f"Invalid continuation token: {reason}",
            code=ErrorCode.INVALID_CONTINUATION_TOKEN,
            details={"token": token, "reason": reason},
        )


class InvalidFuzzyDateError(ValidationError):
    """Raised when an integer is not a valid YYYYMMDD fuzzy date."""

    def __init__(self, fuzzy_date: int) -> None:
        super().__init__(
            message=f"Invalid fuzzy date: {fuzzy_date}",
            code=ErrorCode.INVALID_FUZZY_DATE,
            details={"fuzzy_date": fuzzy_date},
        )
