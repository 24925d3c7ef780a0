"""Budget endpoints for the API."""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.context import RequestContext
from components.core.init_db import get_db
from components.core.schemas import SuccessResponse
from components.budget.repository import BudgetRepository
from components.budget import schemas
from components.category.repository import CategoryRepository
from restapi.endpoints.auth import get_request_context

router = APIRouter(
    prefix="/budget",
    tags=["budget"],
)


@router.get("/categories", response_model=List[schemas.BudgetCategory])
async def read_budget_categories(
    month: Optional[int] = Query(None, ge=1, le=12),
    year: Optional[int] = Query(None, ge=2000, le=2100),
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Get the caller's budget categories, optionally for one month/year."""
    return await BudgetRepository(db).get_all(context.user_id, month=month, year=year)


@router.post("/categories", response_model=schemas.BudgetCategory, status_code=status.HTTP_201_CREATED)
async def create_budget_category(
    budget: schemas.BudgetCategoryCreate,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Set a budget for one of the caller's categories."""
    await CategoryRepository(db).require_owned(budget.category_id, context.user_id)
    return await BudgetRepository(db).create(context.user_id, budget)


@router.put("/categories/{budget_id}", response_model=schemas.BudgetCategory)
async def update_budget_category(
    budget_id: int,
    budget: schemas.BudgetCategoryUpdate,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Update the given fields of a budget category."""
    repo = BudgetRepository(db)
    context.authorize(await repo.get_by_id(budget_id), "Budget category")
    if budget.category_id is not None:
        await CategoryRepository(db).require_owned(budget.category_id, context.user_id)
    return await repo.update(budget_id, budget)


@router.delete("/categories/{budget_id}", response_model=SuccessResponse)
async def delete_budget_category(
    budget_id: int,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Delete a budget category."""
    repo = BudgetRepository(db)
    context.authorize(await repo.get_by_id(budget_id), "Budget category")
    await repo.delete(budget_id)
    return SuccessResponse()


@router.get("/status", response_model=List[schemas.BudgetStatus])
async def read_budget_status(
    month: Optional[int] = Query(None, ge=1, le=12, description="Defaults to the current month"),
    year: Optional[int] = Query(None, ge=2000, le=2100, description="Defaults to the current year"),
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Get budget against actual spending per category for a month."""
    today = date.today()
    return await BudgetRepository(db).get_status(
        context.user_id,
        month or today.month,
        year or today.year,
    )
