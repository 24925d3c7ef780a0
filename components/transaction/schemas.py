"""Pydantic schemas for transaction data validation."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Literal, Optional
from pydantic import Field, field_validator

from components.core.schemas import CamelModel, CoercedDate, reject_null

TransactionType = Literal["income", "expense"]
DateRange = Literal["all", "current_month", "last_month", "last_3_months", "last_6_months", "current_year"]


class TransactionCreate(CamelModel):
    """Schema for transaction creation."""
    description: str = Field(..., min_length=2, max_length=255)
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    date: CoercedDate
    type: TransactionType
    category_id: int
    is_recurring: bool = False
    notes: Optional[str] = None


class TransactionUpdate(CamelModel):
    """Partial transaction update; ownership cannot be changed."""
    description: Optional[str] = Field(None, min_length=2, max_length=255)
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    date: Optional[CoercedDate] = None
    type: Optional[TransactionType] = None
    category_id: Optional[int] = None
    is_recurring: Optional[bool] = None
    notes: Optional[str] = None

    @field_validator("description", "amount", "date", "type", "category_id", "is_recurring", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class Transaction(CamelModel):
    """Schema for transaction response."""
    id: int
    user_id: int
    category_id: int
    description: str
    amount: float
    date: date
    type: str
    is_recurring: bool
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class Pagination(CamelModel):
    total: int
    total_pages: int
    current_page: int
    page_size: int


class TransactionPage(CamelModel):
    """Schema for a page of the transaction list."""
    transactions: List[Transaction]
    pagination: Pagination
