"""Transaction data models."""
from datetime import date as Date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from financefreedom.utils.dates import format_date, parse_date

INCOME_TYPE_ALIASES = ("income", "pemasukan", "kredit", "credit")


class TransactionType(str, Enum):
    """Transaction direction."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_wire(cls, value: Any) -> "TransactionType":
        """Normalise a type string sent by the backend; anything not income is expense."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() in INCOME_TYPE_ALIASES:
            return cls.INCOME
        return cls.EXPENSE


class _TransactionFields(BaseModel):
    title: str = Field(..., min_length=1, description="Short description shown in lists")
    amount: Decimal = Field(..., ge=0, description="Transaction amount, always non-negative")
    type: TransactionType
    category: str = Field(..., description="Category value as accepted by the backend")
    date: Date = Field(..., description="Calendar date (YYYY-MM-DD)")

    @field_validator("type", mode="before")
    @classmethod
    def _normalise_type(cls, v):
        return TransactionType.from_wire(v)

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, v):
        if isinstance(v, str):
            return parse_date(v)
        return v

    @field_serializer("amount", when_used="json")
    def _amount_as_number(self, amount: Decimal) -> float:
        return float(amount)

    @field_serializer("date", when_used="json")
    def _date_as_string(self, d: Date) -> str:
        return format_date(d)

    @property
    def is_income(self) -> bool:
        return self.type is TransactionType.INCOME


class Transaction(_TransactionFields):
    """Transaction as returned by the backend."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "tx_1",
                "title": "Lunch",
                "amount": 25000,
                "type": "expense",
                "category": "Food",
                "date": "2024-01-15",
                "note": None,
            }
        }
    )

    id: Optional[str] = Field(None, description="Server-assigned identifier")
    note: Optional[str] = None


class TransactionCreate(_TransactionFields):
    """Body of POST /transactions."""

    note: str = ""

    @field_validator("title")
    @classmethod
    def _strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title must not be blank")
        return v

    @field_validator("note", mode="before")
    @classmethod
    def _blank_note(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return ""
        return v
