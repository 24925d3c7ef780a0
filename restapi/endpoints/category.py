"""Category endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.context import RequestContext
from components.core.errors import Conflict
from components.core.init_db import get_db
from components.core.logger import get_logger
from components.core.schemas import SuccessResponse
from components.category.repository import CategoryRepository
from components.category import schemas
from restapi.endpoints.auth import get_request_context

logger = get_logger(__name__)

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
)


@router.get("", response_model=List[schemas.Category])
async def read_categories(
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Get the caller's categories."""
    return await CategoryRepository(db).get_all(context.user_id)


@router.post("", response_model=schemas.Category, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: schemas.CategoryCreate,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Create a category."""
    return await CategoryRepository(db).create(context.user_id, category)


@router.patch("/{category_id}", response_model=schemas.Category)
async def update_category(
    category_id: int,
    category: schemas.CategoryUpdate,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Update a category."""
    repo = CategoryRepository(db)
    context.authorize(await repo.get_by_id(category_id), "Category")
    return await repo.update(category_id, category)


@router.delete("/{category_id}", response_model=SuccessResponse)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Delete a category that no transaction or budget refers to."""
    repo = CategoryRepository(db)
    context.authorize(await repo.get_by_id(category_id), "Category")
    if await repo.is_in_use(category_id):
        raise Conflict("Category is in use")

    await repo.delete(category_id)
    logger.info("User %s deleted category %s", context.user_id, category_id)
    return SuccessResponse()
