"""Pydantic schemas for chart-shaped report data."""

from typing import List, Literal
from pydantic import BaseModel

from components.core.schemas import CamelModel

ReportType = Literal["expense_vs_income", "expense_by_category", "monthly_trend"]
TimeRange = Literal["3months", "6months", "12months", "year"]


class IncomeExpensePoint(BaseModel):
    """Income and expenses of one month (`YYYY-MM`)."""
    month: str
    income: float
    expenses: float


class CategoryValue(BaseModel):
    name: str
    value: float


class TrendPoint(BaseModel):
    month: str
    expenses: float


class ReportCharts(CamelModel):
    expense_vs_income: List[IncomeExpensePoint]
    expense_by_category: List[CategoryValue]
    monthly_trend: List[TrendPoint]


class Report(CamelModel):
    report_type: ReportType
    time_range: TimeRange
    charts: ReportCharts


class SpendingChart(CamelModel):
    chart_data: List[IncomeExpensePoint]
