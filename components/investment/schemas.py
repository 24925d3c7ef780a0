"""Pydantic schemas for investment data validation."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import Field, field_validator

from components.core.schemas import CamelModel, CoercedDate, reject_null


class InvestmentCreate(CamelModel):
    """Schema for investment creation."""
    name: str = Field(..., min_length=2, max_length=255)
    type: str = Field(..., min_length=1, max_length=50)
    value: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    initial_value: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    initial_date: CoercedDate
    institution: str = Field(..., min_length=1, max_length=100)
    return_rate: Optional[Decimal] = Field(None, max_digits=6, decimal_places=2)
    notes: Optional[str] = None


class InvestmentUpdate(CamelModel):
    """Partial investment update."""
    name: Optional[str] = Field(None, min_length=2, max_length=255)
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    value: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    initial_value: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    initial_date: Optional[CoercedDate] = None
    institution: Optional[str] = Field(None, min_length=1, max_length=100)
    return_rate: Optional[Decimal] = Field(None, max_digits=6, decimal_places=2)
    notes: Optional[str] = None

    @field_validator("name", "type", "value", "initial_value", "initial_date", "institution", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class Investment(CamelModel):
    """Schema for investment response."""
    id: int
    user_id: int
    name: str
    type: str
    value: float
    initial_value: float
    initial_date: date
    institution: str
    return_rate: Optional[float] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class DistributionItem(CamelModel):
    name: str
    value: float


class PortfolioSummary(CamelModel):
    """Totals across all holdings of a user."""
    total_value: float
    total_initial_value: float
    total_profit: float
    profit_percentage: float
    distribution: List[DistributionItem]


class InvestmentList(CamelModel):
    investments: List[Investment]
    summary: PortfolioSummary
