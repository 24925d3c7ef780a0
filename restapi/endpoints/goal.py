"""Financial goal endpoints for the API."""

from datetime import date
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core import periods
from components.core.context import RequestContext
from components.core.init_db import get_db
from components.core.schemas import SuccessResponse
from components.goal.repository import GoalRepository, savings_potential
from components.goal import schemas
from components.transaction.repository import TransactionRepository
from restapi.endpoints.auth import get_request_context

router = APIRouter(
    prefix="/goals",
    tags=["goals"],
)


@router.get("", response_model=schemas.GoalList)
async def read_goals(
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Get the caller's goals and what this month could add to them."""
    goals = await GoalRepository(db).get_all(context.user_id)
    start, end = periods.month_window(date.today())
    totals = await TransactionRepository(db).totals_by_type(context.user_id, start, end)

    return schemas.GoalList(
        goals=[schemas.Goal.model_validate(goal) for goal in goals],
        savings_potential=savings_potential(totals["income"], totals["expense"]),
    )


@router.get("/{goal_id}", response_model=schemas.Goal)
async def read_goal(
    goal_id: int,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Get a single goal."""
    return context.authorize(await GoalRepository(db).get_by_id(goal_id), "Goal")


@router.post("", response_model=schemas.Goal, status_code=status.HTTP_201_CREATED)
async def create_goal(
    goal: schemas.GoalCreate,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Create a goal."""
    return await GoalRepository(db).create(context.user_id, goal)


@router.patch("/{goal_id}", response_model=schemas.Goal)
async def update_goal(
    goal_id: int,
    goal: schemas.GoalUpdate,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Update the given fields of a goal."""
    repo = GoalRepository(db)
    context.authorize(await repo.get_by_id(goal_id), "Goal")
    return await repo.update(goal_id, goal)


@router.delete("/{goal_id}", response_model=SuccessResponse)
async def delete_goal(
    goal_id: int,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Delete a goal."""
    repo = GoalRepository(db)
    context.authorize(await repo.get_by_id(goal_id), "Goal")
    await repo.delete(goal_id)
    return SuccessResponse()
