"""Core schemas for the application."""

from datetime import date, datetime
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator
from pydantic.alias_generators import to_camel


def coerce_date(value: Any) -> Any:
    """Accept ISO datetime strings and datetimes where a date is expected."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


CoercedDate = Annotated[date, BeforeValidator(coerce_date)]


def reject_null(value: Any) -> Any:
    """Partial updates may omit a required field but never null it."""
    if value is None:
        raise ValueError("Field cannot be null")
    return value


class CamelModel(BaseModel):
    """Base schema exposing camelCase names on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class HealthCheck(BaseModel):
    """Schema for health check response."""
    service_name: str
    status: str


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""
    message: str
    errors: Optional[List[FieldError]] = None


class SuccessResponse(BaseModel):
    success: bool = True
