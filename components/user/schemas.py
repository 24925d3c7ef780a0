"""Pydantic schemas for user data validation."""

from datetime import datetime
from typing import Optional
from pydantic import EmailStr, Field

from components.core.schemas import CamelModel


class UserCreate(CamelModel):
    """Schema for registration."""
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)


class User(CamelModel):
    """Schema for user response; never exposes the password hash."""
    id: int
    username: str
    email: str
    first_name: str
    last_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class UserWithToken(User):
    access_token: str
    token_type: str = "bearer"
