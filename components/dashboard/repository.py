"""Repository for dashboard aggregations."""

from datetime import date
from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from components.core import periods
from components.budget.repository import BudgetRepository
from components.transaction.repository import TransactionRepository
from components.dashboard import schemas


def build_overview(
    totals: Dict[str, float],
    previous_totals: Dict[str, float],
    total_budget: float,
    last_income_date: Optional[date] = None,
) -> schemas.DashboardOverview:
    """
    Derive the overview figures from per-type sums.

    Balance and savings are both income minus expenses of the month; their
    change is relative to the previous month. The budget percentage is the
    share of the month's budget already spent, rounded to a whole number, and
    0 when no budget exists.
    """
    income = totals.get("income", 0.0)
    expenses = totals.get("expense", 0.0)
    savings = income - expenses
    previous_savings = previous_totals.get("income", 0.0) - previous_totals.get("expense", 0.0)
    budget_percentage = round(expenses / total_budget * 100) if total_budget > 0 else 0
    change = periods.percent_change(savings, previous_savings)

    return schemas.DashboardOverview(
        current_balance=round(savings, 2),
        monthly_income=round(income, 2),
        monthly_expenses=round(expenses, 2),
        monthly_savings=round(savings, 2),
        balance_change=change,
        last_income_date=last_income_date,
        budget_percentage=budget_percentage,
        savings_change=change,
    )


class DashboardRepository:
    """Aggregations shown on the dashboard."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
        self.transactions = TransactionRepository(session)
        self.budgets = BudgetRepository(session)

    async def month_totals(self, user_id: int, today: date) -> Dict[str, float]:
        start, end = periods.month_window(today)
        return await self.transactions.totals_by_type(user_id, start, end)

    async def get_overview(self, user_id: int, today: date) -> schemas.DashboardOverview:
        """Overview of the calendar month containing `today`."""
        totals = await self.month_totals(user_id, today)
        previous_totals = await self.month_totals(user_id, periods.add_months(today, -1))
        total_budget = await self.budgets.total_for_month(user_id, today.month, today.year)
        latest_income = await self.transactions.latest_of_type(user_id, "income")

        return build_overview(
            totals,
            previous_totals,
            total_budget,
            latest_income.date if latest_income else None,
        )
