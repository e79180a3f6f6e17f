"""Continuation token wire format.

A token is ``"<cursor>_bkperpageindex_<index>"`` where ``<cursor>`` is the
cursor used to fetch the page being read (the literal ``null`` for the
first page) and ``<index>`` the read position inside that page. Nothing is
escaped: a cursor containing the delimiter cannot be decoded.
"""

from __future__ import annotations

from dataclasses import dataclass

from bkper_sdk.domain.ledger.exceptions import InvalidContinuationTokenError

DELIMITER = "_bkperpageindex_"
NULL_CURSOR = "null"


@dataclass(frozen=True)
class ContinuationToken:
    """Position inside a paged search: page cursor plus read index."""

    cursor: str | None
    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            msg = f"Page index cannot be negative: {self.index}"
            raise ValueError(msg)

    def encode(self) -> str:
        cursor = self.cursor or NULL_CURSOR
        return f"{cursor}{DELIMITER}{self.index}"

    @classmethod
    def decode(cls, token: str) -> ContinuationToken:
        parts = token.split(DELIMITER)
        if len(parts) != 2:
            raise InvalidContinuationTokenError(
                token,
                f"expected '<cursor>{DELIMITER}<index>'",
            )

        cursor, index_text = parts
        if not (index_text.isascii() and index_text.isdigit()):
            raise InvalidContinuationTokenError(
                token,
                "page index must be a non-negative integer",
            )

        if cursor in (NULL_CURSOR, ""):
            return cls(cursor=None, index=int(index_text))
        return cls(cursor=cursor, index=int(index_text))

    def __str__(self) -> str:
        return self.encode()
