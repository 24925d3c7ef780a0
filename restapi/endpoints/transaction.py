"""Transaction endpoints for the API."""

import math
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.config import get_settings
from components.core.context import RequestContext
from components.core.errors import InvalidInput
from components.core.init_db import get_db
from components.core.logger import get_logger
from components.core.schemas import SuccessResponse
from components.category.repository import CategoryRepository
from components.transaction.repository import TransactionFilters, TransactionRepository
from components.transaction import schemas
from restapi.endpoints.auth import get_request_context

settings = get_settings()
logger = get_logger(__name__)

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
)


def parse_category_filter(category_id: Optional[str]) -> Optional[int]:
    """`all` or a missing value means no category filter."""
    if category_id is None or category_id == "all":
        return None
    try:
        return int(category_id)
    except ValueError:
        raise InvalidInput.for_field("categoryId", "Must be a category id or 'all'")


@router.get("", response_model=schemas.TransactionPage)
async def read_transactions(
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100, description="Page size"),
    type: str = Query("all", pattern="^(all|income|expense)$"),
    category_id: Optional[str] = Query(None, alias="categoryId"),
    date_range: schemas.DateRange = Query("all", alias="dateRange"),
    search: Optional[str] = Query(None, description="Matches description or notes"),
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """
    Get a page of the caller's transactions, newest first.

    The pagination block is computed from a count query using the same
    filters as the page itself.
    """
    filters = TransactionFilters(
        type=type,
        category_id=parse_category_filter(category_id),
        date_range=date_range,
        search=search or None,
        today=date.today(),
    )
    repo = TransactionRepository(db)
    transactions = await repo.get_all(context.user_id, filters, skip=(page - 1) * limit, limit=limit)
    total = await repo.count(context.user_id, filters)

    return schemas.TransactionPage(
        transactions=[schemas.Transaction.model_validate(t) for t in transactions],
        pagination=schemas.Pagination(
            total=total,
            total_pages=math.ceil(total / limit),
            current_page=page,
            page_size=limit,
        ),
    )


@router.get("/recent", response_model=List[schemas.Transaction])
async def read_recent_transactions(
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Get the latest transactions, newest first."""
    return await TransactionRepository(db).get_recent(
        context.user_id, settings.RECENT_TRANSACTIONS_LIMIT
    )


@router.get("/{transaction_id}", response_model=schemas.Transaction)
async def read_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Get a single transaction."""
    transaction = await TransactionRepository(db).get_by_id(transaction_id)
    return context.authorize(transaction, "Transaction")


@router.post("", response_model=schemas.Transaction, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction: schemas.TransactionCreate,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Create a transaction in one of the caller's categories."""
    await CategoryRepository(db).require_owned(transaction.category_id, context.user_id)
    return await TransactionRepository(db).create(context.user_id, transaction)


@router.put("/{transaction_id}", response_model=schemas.Transaction)
async def update_transaction(
    transaction_id: int,
    transaction: schemas.TransactionUpdate,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Update the given fields of a transaction."""
    repo = TransactionRepository(db)
    context.authorize(await repo.get_by_id(transaction_id), "Transaction")
    if transaction.category_id is not None:
        await CategoryRepository(db).require_owned(transaction.category_id, context.user_id)
    return await repo.update(transaction_id, transaction)


@router.delete("/{transaction_id}", response_model=SuccessResponse)
async def delete_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Delete a transaction."""
    repo = TransactionRepository(db)
    context.authorize(await repo.get_by_id(transaction_id), "Transaction")
    await repo.delete(transaction_id)
    logger.info("User %s deleted transaction %s", context.user_id, transaction_id)
    return SuccessResponse()
