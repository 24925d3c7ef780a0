"""Repository for budget operations."""

from datetime import date
from typing import List, Optional
from sqlalchemy import func, select

from components.core import periods
from components.core.repository import OwnedRepository
from components.budget.models import BudgetCategory
from components.budget import schemas
from components.category.models import Category
from components.transaction.repository import TransactionRepository


def consumed_percentage(spent: float, budget: float) -> float:
    """Share of the budget already spent, 0 when there is no budget."""
    return round(spent / budget * 100, 2) if budget > 0 else 0


class BudgetRepository(OwnedRepository[BudgetCategory]):
    """Repository for budget category operations."""
    model = BudgetCategory

    async def get_all(
        self,
        user_id: int,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> List[BudgetCategory]:
        """Get a user's budget categories, optionally for one month/year."""
        query = select(BudgetCategory).where(BudgetCategory.user_id == user_id)
        if month is not None:
            query = query.where(BudgetCategory.month == month)
        if year is not None:
            query = query.where(BudgetCategory.year == year)
        result = await self.session.execute(
            query.order_by(BudgetCategory.year, BudgetCategory.month, BudgetCategory.id)
        )
        return list(result.scalars().all())

    async def total_for_month(self, user_id: int, month: int, year: int) -> float:
        """Sum of all budget amounts of the month."""
        result = await self.session.execute(
            select(func.sum(BudgetCategory.amount)).where(
                BudgetCategory.user_id == user_id,
                BudgetCategory.month == month,
                BudgetCategory.year == year,
            )
        )
        return float(result.scalar() or 0)

    async def get_status(self, user_id: int, month: int, year: int) -> List[schemas.BudgetStatus]:
        """
        Compare each budget category of the month with what was spent.

        Spent is the sum of expense transactions of the same category dated
        within the month.
        """
        result = await self.session.execute(
            select(BudgetCategory, Category)
            .join(Category, BudgetCategory.category_id == Category.id)
            .where(
                BudgetCategory.user_id == user_id,
                BudgetCategory.month == month,
                BudgetCategory.year == year,
            )
            .order_by(BudgetCategory.id)
        )
        rows = result.all()
        if not rows:
            return []

        start, end = periods.month_window(date(year, month, 1))
        spent_by_category = await TransactionRepository(self.session).expenses_by_category(user_id, start, end)

        status = []
        for budget, category in rows:
            amount = float(budget.amount)
            spent = spent_by_category.get(budget.category_id, 0.0)
            status.append(schemas.BudgetStatus(
                id=budget.id,
                category_id=budget.category_id,
                name=category.name,
                color=category.color,
                icon=category.icon,
                month=month,
                year=year,
                budget=amount,
                spent=spent,
                percentage=consumed_percentage(spent, amount),
            ))
        return status
