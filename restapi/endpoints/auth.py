"""Authentication endpoints for user login and registration."""

from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.config import get_settings
from components.core.context import RequestContext
from components.core.errors import InvalidInput, Unauthorized
from components.core.init_db import get_db
from components.core.logger import get_logger
from components.core.security import create_access_token, verify_token
from components.user.models import User
from components.user.repository import UserRepository
from components.user.schemas import UserCreate, User as UserSchema, UserWithToken

settings = get_settings()
logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX.lstrip('/')}/auth/login")


async def get_current_user(
    db: AsyncSession = Depends(get_db),
    token: str = Depends(oauth2_scheme)
) -> User:
    """Get current user from JWT token."""
    payload = verify_token(token)
    if payload is None:
        raise Unauthorized("Could not validate credentials")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise Unauthorized("Could not validate credentials")

    user = await UserRepository(db).get_by_id(user_id)
    if user is None:
        raise Unauthorized("User not found")
    return user


async def get_request_context(current_user: User = Depends(get_current_user)) -> RequestContext:
    """Request-scoped identity handed to every protected endpoint."""
    return RequestContext(user_id=current_user.id)


def _already_registered(field: str) -> InvalidInput:
    return InvalidInput.for_field(field, f"{field.capitalize()} already registered")


def _with_token(user: User) -> UserWithToken:
    access_token = create_access_token(data={"sub": str(user.id)})
    return UserWithToken(
        **UserSchema.model_validate(user).model_dump(),
        access_token=access_token,
    )


@router.post("/register", response_model=UserWithToken, status_code=status.HTTP_201_CREATED)
async def register(
    user_in: UserCreate,
    db: AsyncSession = Depends(get_db)
) -> Any:
    """Create new user and return JWT token."""
    repo = UserRepository(db)
    taken = await repo.taken_field(user_in.username, user_in.email)
    if taken:
        raise _already_registered(taken)

    try:
        user = await repo.create(user_in)
    except IntegrityError:
        # Lost a race with a concurrent registration
        await db.rollback()
        taken = await repo.taken_field(user_in.username, user_in.email)
        raise _already_registered(taken or "username")

    logger.info("Registered user %s", user.id)
    return _with_token(user)


@router.post("/login", response_model=UserWithToken)
async def login(
    db: AsyncSession = Depends(get_db),
    form_data: OAuth2PasswordRequestForm = Depends()
) -> Any:
    """Login user and return JWT token."""
    user = await UserRepository(db).authenticate(form_data.username, form_data.password)
    if not user:
        logger.info("Failed login for %r", form_data.username)
        raise Unauthorized("Incorrect username or password")
    return _with_token(user)


@router.get("/me", response_model=UserSchema)
async def read_current_user(current_user: User = Depends(get_current_user)) -> Any:
    """Get the authenticated user."""
    return current_user
