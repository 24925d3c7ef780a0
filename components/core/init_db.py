"""Database initialization and dependency injection."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import fastapi
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.database import DatabaseManager
from components.core.logger import get_logger
# Import all models to ensure they're registered
import components.user.models
import components.category.models
import components.transaction.models
import components.budget.models
import components.goal.models
import components.investment.models

logger = get_logger(__name__)

# Create a single instance of DatabaseManager
db_manager = DatabaseManager()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for getting database sessions."""
    async with db_manager.get_db() as session:
        yield session


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    """Create missing tables on startup and release the pool on shutdown."""
    await db_manager.create_tables()
    logger.info("Database tables are ready")
    yield
    await db_manager.dispose()
