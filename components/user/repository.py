"""Repository for user operations."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.user.models import User
from components.user.schemas import UserCreate
from components.core.security import get_password_hash, verify_password


class UserRepository:
    """Repository for user operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, user: UserCreate) -> User:
        """Create a new user with a hashed password."""
        db_user = User(
            username=user.username,
            email=user.email,
            password=get_password_hash(user.password),
            first_name=user.first_name,
            last_name=user.last_name,
        )
        self.session.add(db_user)
        await self.session.commit()
        await self.session.refresh(db_user)
        return db_user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        result = await self.session.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        result = await self.session.execute(
            select(User).where(User.username == username)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def taken_field(self, username: str, email: str) -> Optional[str]:
        """Name of the unique field (`username` or `email`) already registered, if any."""
        if await self.get_by_username(username):
            return "username"
        if await self.get_by_email(email):
            return "email"
        return None

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """Return the user when the credentials match."""
        user = await self.get_by_username(username)
        if not user or not verify_password(password, user.password):
            return None
        return user
