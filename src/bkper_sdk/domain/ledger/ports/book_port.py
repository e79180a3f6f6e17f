"""Book port: formatting settings of the remote book."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bkper_sdk.domain.ledger.value_objects import BookFormat


class BookPort(ABC):
    """Interface for reading book settings."""

    @abstractmethod
    async def get_book_format(self) -> BookFormat:
        """Fraction digits, decimal separator and date pattern of the book."""
