"""Application error taxonomy mapped to HTTP responses by the API layer."""

from typing import Dict, List, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that carry their own HTTP status."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> Dict:
        return {"message": self.message}


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class InvalidInput(AppError):
    """Validation failure; `errors` lists the offending fields."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, str]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def for_field(cls, field: str, message: str) -> "InvalidInput":
        return cls(f"{field}: {message}", [{"field": field, "message": message}])

    def to_body(self) -> Dict:
        return {"message": self.message, "errors": self.errors}


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not allowed to access this resource"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InternalError(AppError):
    pass
