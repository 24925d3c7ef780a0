"""Dashboard endpoints for the API."""

from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.context import RequestContext
from components.core.init_db import get_db
from components.dashboard.repository import DashboardRepository
from components.dashboard import schemas
from components.report.repository import ReportRepository
from components.report import schemas as report_schemas
from restapi.endpoints.auth import get_request_context

router = APIRouter(
    prefix="/dashboard",
    tags=["dashboard"],
)


@router.get("/overview", response_model=schemas.DashboardOverview)
async def read_overview(
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """
    Get the current month overview.

    Returns income, expenses, savings and balance for the month, the change
    against the previous month, the latest income date and the share of the
    month's budget already spent.
    """
    return await DashboardRepository(db).get_overview(context.user_id, date.today())


@router.get("/spending-chart", response_model=report_schemas.SpendingChart)
async def read_spending_chart(
    time_range: report_schemas.TimeRange = Query("6months", alias="timeRange"),
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Get monthly income and expenses for the dashboard chart."""
    return await ReportRepository(db).get_spending_chart(context.user_id, time_range, date.today())
