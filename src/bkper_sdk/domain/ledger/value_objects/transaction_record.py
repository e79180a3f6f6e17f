"""Transaction records as returned by the remote search endpoint."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from bkper_sdk.domain.ledger.value_objects.wire_decimal import parse_wire_decimal


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class AccountRef(_WireModel):
    """Reference to the credit or debit account of a transaction."""

    id: str
    name: str | None = None


class FileRef(_WireModel):
    """Reference to a file attached to a transaction."""

    id: str
    name: str | None = None
    content_type: str | None = None
    url: str | None = None


class TransactionRecord(_WireModel):
    """Immutable transaction record.

    The amount is never negative; the direction comes from the credit and
    debit account roles.
    """

    id: str | None = None
    date: str | None = None  # ISO yyyy-MM-dd
    date_value: int | None = None  # YYYYMMDD
    amount: Decimal = Decimal("0")
    description: str | None = None
    credit_account: AccountRef | None = None
    debit_account: AccountRef | None = None
    posted: bool = False
    checked: bool = False
    trashed: bool = False
    properties: dict[str, str] = Field(default_factory=dict)
    files: list[FileRef] = Field(default_factory=list)
    remote_ids: list[str] = Field(default_factory=list)
    created_at: str | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        amount = parse_wire_decimal(v)
        if amount < 0:
            msg = "Transaction amount cannot be negative"
            raise ValueError(msg)
        return amount

    @field_validator("properties", mode="before")
    @classmethod
    def validate_properties(cls, v: Any) -> dict[str, str]:
        if v is None:
            return {}
        return {str(key): str(value) for key, value in dict(v).items()}

    @field_validator("files", "remote_ids", mode="before")
    @classmethod
    def validate_lists(cls, v: Any) -> list[Any]:
        return [] if v is None else v

    def get_property(self, *keys: str) -> str | None:
        """First non-empty property among the given keys."""
        for key in keys:
            value = self.properties.get(key)
            if value:
                return value
        return None
