"""Repository for transaction operations."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.sql import Select

from components.core import periods
from components.core.repository import OwnedRepository
from components.transaction.models import Transaction

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Make `%` and `_` in user text match literally."""
    for char in (LIKE_ESCAPE, "%", "_"):
        text = text.replace(char, LIKE_ESCAPE + char)
    return text


@dataclass
class TransactionFilters:
    """Optional narrowing of a user's transaction list."""
    type: Optional[str] = None
    category_id: Optional[int] = None
    date_range: Optional[str] = None
    search: Optional[str] = None
    today: date = field(default_factory=date.today)


class TransactionRepository(OwnedRepository[Transaction]):
    """Repository for transaction operations."""
    model = Transaction

    def _filtered(self, query: Select, user_id: int, filters: Optional[TransactionFilters]) -> Select:
        query = query.where(Transaction.user_id == user_id)
        if filters is None:
            return query

        if filters.type and filters.type != "all":
            query = query.where(Transaction.type == filters.type)
        if filters.category_id is not None:
            query = query.where(Transaction.category_id == filters.category_id)

        window = periods.date_range_window(filters.date_range, filters.today)
        if window:
            start, end = window
            query = query.where(Transaction.date >= start, Transaction.date < end)

        if filters.search:
            pattern = f"%{escape_like(filters.search.strip())}%"
            query = query.where(or_(
                Transaction.description.ilike(pattern, escape=LIKE_ESCAPE),
                Transaction.notes.ilike(pattern, escape=LIKE_ESCAPE),
            ))
        return query

    async def get_all(
        self,
        user_id: int,
        filters: Optional[TransactionFilters] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Transaction]:
        """Get a user's transactions, newest first."""
        query = self._filtered(select(Transaction), user_id, filters)
        query = query.order_by(Transaction.date.desc(), Transaction.id.desc()).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, user_id: int, filters: Optional[TransactionFilters] = None) -> int:
        """Count transactions matching the same filters as get_all."""
        query = self._filtered(select(func.count(Transaction.id)), user_id, filters)
        result = await self.session.execute(query)
        return result.scalar() or 0

    async def get_recent(self, user_id: int, limit: int) -> List[Transaction]:
        return await self.get_all(user_id, limit=limit)

    async def get_between(self, user_id: int, start: date, end: date) -> List[Transaction]:
        """Transactions with start <= date < end, oldest first."""
        result = await self.session.execute(
            select(Transaction)
            .where(
                Transaction.user_id == user_id,
                Transaction.date >= start,
                Transaction.date < end,
            )
            .order_by(Transaction.date, Transaction.id)
        )
        return list(result.scalars().all())

    async def totals_by_type(self, user_id: int, start: date, end: date) -> Dict[str, float]:
        """Sum of amounts per type within the window; missing types are 0."""
        result = await self.session.execute(
            select(Transaction.type, func.sum(Transaction.amount))
            .where(
                Transaction.user_id == user_id,
                Transaction.date >= start,
                Transaction.date < end,
            )
            .group_by(Transaction.type)
        )
        totals = {"income": 0.0, "expense": 0.0}
        for transaction_type, amount in result.all():
            totals[transaction_type] = float(amount or 0)
        return totals

    async def expenses_by_category(self, user_id: int, start: date, end: date) -> Dict[int, float]:
        """Sum of expense amounts per category within the window."""
        result = await self.session.execute(
            select(Transaction.category_id, func.sum(Transaction.amount))
            .where(
                Transaction.user_id == user_id,
                Transaction.type == "expense",
                Transaction.date >= start,
                Transaction.date < end,
            )
            .group_by(Transaction.category_id)
        )
        return {category_id: float(amount or 0) for category_id, amount in result.all()}

    async def latest_of_type(self, user_id: int, transaction_type: str) -> Optional[Transaction]:
        result = await self.session.execute(
            select(Transaction)
            .where(Transaction.user_id == user_id, Transaction.type == transaction_type)
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()
