"""Pydantic schemas for dashboard data."""

from datetime import date
from typing import Optional

from components.core.schemas import CamelModel


class DashboardOverview(CamelModel):
    """Figures for the current calendar month."""
    current_balance: float
    monthly_income: float
    monthly_expenses: float
    monthly_savings: float
    balance_change: float
    last_income_date: Optional[date] = None
    budget_percentage: int
    savings_change: float
