"""Application configuration and router setup."""

from typing import Sequence, Union

import fastapi
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware import cors
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from components.core import init_db
from components.core.config import get_settings
from components.core.errors import AppError, InternalError, InvalidInput, Unauthorized
from components.core.logger import get_logger, setup_logging
from components.core.schemas import ErrorResponse
from restapi.endpoints import (
    auth,
    budget,
    category,
    dashboard,
    goal,
    health_check,
    investment,
    report,
    transaction,
)

settings = get_settings()
logger = get_logger(__name__)

TITLE = "Personal Finance Dashboard"
DESCRIPTION = "Transactions, budgets, goals and investments of authenticated users"
VERSION = "1.0.0"
LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}
ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid input"},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Not authenticated"},
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse, "description": "Owned by another user"},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Not found"},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Conflict"},
}


def field_name(loc: Sequence[Union[str, int]]) -> str:
    """Turn a pydantic error location into the client-facing field name."""
    parts = [str(part) for part in loc if part not in LOCATION_PREFIXES]
    return ".".join(parts) if parts else str(loc[-1])


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": field_name(error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]
    message = "; ".join(f"{error['field']}: {error['message']}" for error in errors)
    error = InvalidInput(message or None, errors)
    return JSONResponse(status_code=error.status_code, content=error.to_body())


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # The cause stays in the server log; clients get a generic message
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_body())


def create_app() -> fastapi.FastAPI:
    """Create and configure the FastAPI application."""
    setup_logging(settings.LOG_LEVEL)

    app = fastapi.FastAPI(
        title=TITLE,
        description=DESCRIPTION,
        version=VERSION,
        lifespan=init_db.lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        cors.CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error responses all share the {"message": ...} body
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, internal_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    # Include routers
    app.include_router(health_check.router, prefix=settings.API_PREFIX)
    for module in (auth, category, transaction, dashboard, budget, goal, investment, report):
        app.include_router(module.router, prefix=settings.API_PREFIX, responses=ERROR_RESPONSES)

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        openapi_schema = get_openapi(
            title=TITLE,
            version=VERSION,
            description=DESCRIPTION,
            routes=app.routes,
        )
        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi

    return app
