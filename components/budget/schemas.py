"""Pydantic schemas for budget data validation."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import Field, field_validator

from components.core.schemas import CamelModel, reject_null


class BudgetCategoryCreate(CamelModel):
    """Schema for budget category creation."""
    category_id: int
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=2000, le=2100)


class BudgetCategoryUpdate(CamelModel):
    """Partial budget category update."""
    category_id: Optional[int] = None
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    month: Optional[int] = Field(None, ge=1, le=12)
    year: Optional[int] = Field(None, ge=2000, le=2100)

    @field_validator("category_id", "amount", "month", "year", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class BudgetCategory(CamelModel):
    """Schema for budget category response."""
    id: int
    user_id: int
    category_id: int
    amount: float
    month: int
    year: int
    created_at: datetime
    updated_at: datetime


class BudgetStatus(CamelModel):
    """Budget against actual spending for one category and month."""
    id: int
    category_id: int
    name: str
    color: Optional[str] = None
    icon: Optional[str] = None
    month: int
    year: int
    budget: float
    spent: float
    percentage: float
