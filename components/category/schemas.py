"""Pydantic schemas for category data validation."""

from datetime import datetime
from typing import Literal, Optional
from pydantic import Field, field_validator

from components.core.schemas import CamelModel, reject_null

CategoryType = Literal["income", "expense"]


class CategoryCreate(CamelModel):
    """Schema for category creation."""
    name: str = Field(..., min_length=2, max_length=100)
    type: CategoryType
    color: Optional[str] = Field(None, max_length=20)
    icon: Optional[str] = Field(None, max_length=50)


class CategoryUpdate(CamelModel):
    """Partial category update."""
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    type: Optional[CategoryType] = None
    color: Optional[str] = Field(None, max_length=20)
    icon: Optional[str] = Field(None, max_length=50)

    @field_validator("name", "type", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class Category(CamelModel):
    """Schema for category response."""
    id: int
    user_id: int
    name: str
    type: str
    color: Optional[str] = None
    icon: Optional[str] = None
    created_at: datetime
    updated_at: datetime
