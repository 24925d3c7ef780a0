"""Report endpoints for the API."""

from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.context import RequestContext
from components.core.init_db import get_db
from components.report.repository import ReportRepository
from components.report import schemas
from restapi.endpoints.auth import get_request_context

router = APIRouter(
    prefix="/reports",
    tags=["reports"],
)


@router.get("", response_model=schemas.Report)
async def read_report(
    report_type: schemas.ReportType = Query("expense_vs_income", alias="reportType"),
    time_range: schemas.TimeRange = Query("6months", alias="timeRange"),
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """
    Get chart data for the reports page.

    - expenseVsIncome: income and expenses per month
    - expenseByCategory: expenses per category, largest first
    - monthlyTrend: expenses per month

    Every month of the time range is present, zero-filled.
    """
    return await ReportRepository(db).get_report(
        context.user_id, report_type, time_range, date.today()
    )
