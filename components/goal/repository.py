"""Repository for goal operations."""

from components.core.repository import OwnedRepository
from components.goal.models import Goal


class GoalRepository(OwnedRepository[Goal]):
    """Repository for goal operations."""
    model = Goal


def savings_potential(monthly_income: float, monthly_expenses: float) -> float:
    """What is left of this month's income after expenses, never negative."""
    return round(max(0.0, monthly_income - monthly_expenses), 2)
