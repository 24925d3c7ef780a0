"""Repository for investment operations."""

from typing import Dict, Iterable

from components.core.repository import OwnedRepository
from components.investment.models import Investment
from components.investment import schemas


class InvestmentRepository(OwnedRepository[Investment]):
    """Repository for investment operations."""
    model = Investment


def summarize_portfolio(investments: Iterable) -> schemas.PortfolioSummary:
    """
    Compute portfolio totals.

    Profit is current value minus initial value; the profit percentage is
    relative to the initial value and is 0 when nothing was invested. The
    distribution sums current value per investment type, in order of first
    appearance.
    """
    total_value = 0.0
    total_initial_value = 0.0
    by_type: Dict[str, float] = {}

    for investment in investments:
        value = float(investment.value)
        total_value += value
        total_initial_value += float(investment.initial_value)
        by_type[investment.type] = by_type.get(investment.type, 0.0) + value

    total_profit = total_value - total_initial_value
    profit_percentage = (
        (total_profit / total_initial_value * 100)
        if total_initial_value > 0 else 0
    )

    return schemas.PortfolioSummary(
        total_value=round(total_value, 2),
        total_initial_value=round(total_initial_value, 2),
        total_profit=round(total_profit, 2),
        profit_percentage=round(profit_percentage, 2),
        distribution=[
            schemas.DistributionItem(name=name, value=round(value, 2))
            for name, value in by_type.items()
        ],
    )
