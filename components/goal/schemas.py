"""Pydantic schemas for goal data validation."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import Field, field_validator

from components.core.schemas import CamelModel, CoercedDate, reject_null


class GoalCreate(CamelModel):
    """Schema for goal creation. Past deadlines are accepted."""
    name: str = Field(..., min_length=2, max_length=255)
    target: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    current_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    deadline: CoercedDate
    category: str = Field(..., min_length=1, max_length=100)
    notes: Optional[str] = None


class GoalUpdate(CamelModel):
    """Partial goal update."""
    name: Optional[str] = Field(None, min_length=2, max_length=255)
    target: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    current_amount: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    deadline: Optional[CoercedDate] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    notes: Optional[str] = None

    @field_validator("name", "target", "current_amount", "deadline", "category", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class Goal(CamelModel):
    """Schema for goal response."""
    id: int
    user_id: int
    name: str
    target: float
    current_amount: float
    deadline: date
    category: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class GoalList(CamelModel):
    goals: List[Goal]
    savings_potential: float
