"""Shared data-access operations for user-owned records."""

from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.database import utcnow

ModelT = TypeVar("ModelT")


class OwnedRepository(Generic[ModelT]):
    """
    Create/read/update/delete for a model with `id` and `user_id` columns.

    Ownership is not checked here: callers compare `user_id` with the
    request context before mutating what `get_by_id` returns.
    """
    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, user_id: int, data: BaseModel) -> ModelT:
        """Insert a row owned by `user_id` from a validated create schema."""
        db_obj = self.model(user_id=user_id, **data.model_dump())
        return await self._save(db_obj)

    async def get_by_id(self, obj_id: int) -> Optional[ModelT]:
        result = await self.session.execute(
            select(self.model).where(self.model.id == obj_id)
        )
        return result.scalar_one_or_none()

    async def get_all(self, user_id: int) -> List[ModelT]:
        result = await self.session.execute(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def update(self, obj_id: int, data: BaseModel) -> Optional[ModelT]:
        """Apply the fields present in `data`; returns None if the row is gone."""
        db_obj = await self.get_by_id(obj_id)
        if not db_obj:
            return None

        self._apply(db_obj, data.model_dump(exclude_unset=True))
        # An empty partial update still counts as a modification
        db_obj.updated_at = utcnow()
        await self.session.commit()
        await self.session.refresh(db_obj)
        return db_obj

    async def delete(self, obj_id: int) -> bool:
        """Delete a row; False means nothing matched."""
        db_obj = await self.get_by_id(obj_id)
        if not db_obj:
            return False

        await self.session.delete(db_obj)
        await self.session.commit()
        return True

    async def _save(self, db_obj: ModelT) -> ModelT:
        self.session.add(db_obj)
        await self.session.commit()
        await self.session.refresh(db_obj)
        return db_obj

    @staticmethod
    def _apply(db_obj: Any, values: dict) -> None:
        for field, value in values.items():
            setattr(db_obj, field, value)
