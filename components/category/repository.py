"""Repository for category operations."""

from typing import Dict
from sqlalchemy import select

from components.core.errors import InvalidInput
from components.core.repository import OwnedRepository
from components.category.models import Category
from components.transaction.models import Transaction
from components.budget.models import BudgetCategory


class CategoryRepository(OwnedRepository[Category]):
    """Repository for category operations."""
    model = Category

    async def is_in_use(self, category_id: int) -> bool:
        """Check if any transaction or budget category references the category."""
        for model in (Transaction, BudgetCategory):
            result = await self.session.execute(
                select(model.id).where(model.category_id == category_id).limit(1)
            )
            if result.first() is not None:
                return True
        return False

    async def get_names(self, user_id: int) -> Dict[int, str]:
        """Map category id to name for a user's categories."""
        result = await self.session.execute(
            select(Category.id, Category.name).where(Category.user_id == user_id)
        )
        return {category_id: name for category_id, name in result.all()}

    async def require_owned(self, category_id: int, user_id: int) -> Category:
        """Get a category referenced by another record of `user_id`."""
        category = await self.get_by_id(category_id)
        if category is None or category.user_id != user_id:
            raise InvalidInput.for_field("categoryId", f"Category {category_id} does not exist")
        return category
