"""Repository for report aggregations."""

from datetime import date
from typing import Dict, Iterable, List

import pandas as pd
from sqlalchemy.ext.asyncio import AsyncSession

from components.core import periods
from components.category.repository import CategoryRepository
from components.transaction.repository import TransactionRepository
from components.report import schemas

COLUMNS = ["month", "type", "category_id", "amount"]


def transactions_frame(transactions: Iterable) -> pd.DataFrame:
    """One row per transaction with its `YYYY-MM` month."""
    return pd.DataFrame(
        [
            {
                "month": transaction.date.strftime("%Y-%m"),
                "type": transaction.type,
                "category_id": transaction.category_id,
                "amount": float(transaction.amount),
            }
            for transaction in transactions
        ],
        columns=COLUMNS,
    )


def monthly_totals(frame: pd.DataFrame, months: List[str]) -> pd.DataFrame:
    """Income and expense sums indexed by month, zero-filled for every month."""
    if frame.empty:
        return pd.DataFrame(0.0, index=months, columns=["income", "expense"])
    table = frame.groupby(["month", "type"])["amount"].sum().unstack(fill_value=0.0)
    return table.reindex(index=months, columns=["income", "expense"], fill_value=0.0)


def expense_vs_income(totals: pd.DataFrame) -> List[schemas.IncomeExpensePoint]:
    return [
        schemas.IncomeExpensePoint(
            month=month,
            income=round(float(row["income"]), 2),
            expenses=round(float(row["expense"]), 2),
        )
        for month, row in totals.iterrows()
    ]


def monthly_trend(totals: pd.DataFrame) -> List[schemas.TrendPoint]:
    return [
        schemas.TrendPoint(month=month, expenses=round(float(row["expense"]), 2))
        for month, row in totals.iterrows()
    ]


def expense_by_category(frame: pd.DataFrame, names: Dict[int, str]) -> List[schemas.CategoryValue]:
    """Expense sums per category, largest first."""
    expenses = frame[frame["type"] == "expense"]
    if expenses.empty:
        return []
    sums = expenses.groupby("category_id")["amount"].sum().sort_values(ascending=False)
    return [
        schemas.CategoryValue(
            name=names.get(int(category_id), f"Category {category_id}"),
            value=round(float(amount), 2),
        )
        for category_id, amount in sums.items()
    ]


class ReportRepository:
    """Chart data computed from a user's transactions."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
        self.transactions = TransactionRepository(session)
        self.categories = CategoryRepository(session)

    async def _frame(self, user_id: int, window: periods.Window) -> pd.DataFrame:
        start, end = window
        return transactions_frame(await self.transactions.get_between(user_id, start, end))

    async def get_report(
        self,
        user_id: int,
        report_type: str,
        time_range: str,
        today: date,
    ) -> schemas.Report:
        """
        Build every chart of the reports page for the time range.

        All three charts are returned so the client can switch tabs without
        another request; `report_type` is echoed back.
        """
        window = periods.report_window(time_range, today)
        months = [month.strftime("%Y-%m") for month in periods.month_starts(window)]
        frame = await self._frame(user_id, window)
        totals = monthly_totals(frame, months)
        names = await self.categories.get_names(user_id)

        return schemas.Report(
            report_type=report_type,
            time_range=time_range,
            charts=schemas.ReportCharts(
                expense_vs_income=expense_vs_income(totals),
                expense_by_category=expense_by_category(frame, names),
                monthly_trend=monthly_trend(totals),
            ),
        )

    async def get_spending_chart(self, user_id: int, time_range: str, today: date) -> schemas.SpendingChart:
        """Monthly income and expenses for the dashboard chart."""
        window = periods.report_window(time_range, today)
        months = [month.strftime("%Y-%m") for month in periods.month_starts(window)]
        totals = monthly_totals(await self._frame(user_id, window), months)
        return schemas.SpendingChart(chart_data=expense_vs_income(totals))
