"""Investment endpoints for the API."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.context import RequestContext
from components.core.init_db import get_db
from components.core.schemas import SuccessResponse
from components.investment.repository import InvestmentRepository, summarize_portfolio
from components.investment import schemas
from restapi.endpoints.auth import get_request_context

router = APIRouter(
    prefix="/investments",
    tags=["investments"],
)


@router.get("", response_model=schemas.InvestmentList)
async def read_investments(
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """
    Get the caller's investments with a portfolio summary.

    The summary holds total value, total initial value, profit, profit
    percentage and the value distribution by investment type.
    """
    investments = await InvestmentRepository(db).get_all(context.user_id)
    return schemas.InvestmentList(
        investments=[schemas.Investment.model_validate(item) for item in investments],
        summary=summarize_portfolio(investments),
    )


@router.get("/{investment_id}", response_model=schemas.Investment)
async def read_investment(
    investment_id: int,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Get a single investment."""
    return context.authorize(await InvestmentRepository(db).get_by_id(investment_id), "Investment")


@router.post("", response_model=schemas.Investment, status_code=status.HTTP_201_CREATED)
async def create_investment(
    investment: schemas.InvestmentCreate,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Create an investment."""
    return await InvestmentRepository(db).create(context.user_id, investment)


@router.patch("/{investment_id}", response_model=schemas.Investment)
async def update_investment(
    investment_id: int,
    investment: schemas.InvestmentUpdate,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Update the given fields of an investment."""
    repo = InvestmentRepository(db)
    context.authorize(await repo.get_by_id(investment_id), "Investment")
    return await repo.update(investment_id, investment)


@router.delete("/{investment_id}", response_model=SuccessResponse)
async def delete_investment(
    investment_id: int,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Delete an investment."""
    repo = InvestmentRepository(db)
    context.authorize(await repo.get_by_id(investment_id), "Investment")
    await repo.delete(investment_id)
    return SuccessResponse()
