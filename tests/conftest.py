import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from components.core.database import Base, DatabaseManager
from components.core.init_db import get_db
from components.user.repository import UserRepository
from components.user.schemas import UserCreate
from restapi.router import create_app


@pytest_asyncio.fixture
async def engine():
    """
    In-memory SQLite engine with the full schema; StaticPool keeps a single
    connection so every session sees the same database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_manager(engine):
    return DatabaseManager(engine)


@pytest_asyncio.fixture
async def session(db_manager):
    async with db_manager.get_db() as session:
        yield session


@pytest.fixture
def app(db_manager):
    app = create_app()

    async def override_get_db():
        async with db_manager.get_db() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


async def register(client, username):
    response = await client.post("/api/auth/register", json={
        "username": username,
        "email": f"{username}@example.com",
        "password": "secret123",
        "firstName": username.title(),
    })
    assert response.status_code == 201, response.text
    return response.json()


@pytest_asyncio.fixture
async def alice(client):
    """Registered user with bearer headers."""
    user = await register(client, "alice")
    return {"id": user["id"], "headers": {"Authorization": f"Bearer {user['accessToken']}"}}


@pytest_asyncio.fixture
async def bob(client):
    user = await register(client, "bob")
    return {"id": user["id"], "headers": {"Authorization": f"Bearer {user['accessToken']}"}}


@pytest_asyncio.fixture
async def owner(session):
    """User created directly through the repository."""
    return await UserRepository(session).create(UserCreate(
        username="owner",
        email="owner@example.com",
        password="secret123",
        first_name="Owner",
    ))


async def create_category(client, user, name="Food", type="expense"):
    response = await client.post(
        "/api/categories", json={"name": name, "type": type}, headers=user["headers"]
    )
    assert response.status_code == 201, response.text
    return response.json()


async def create_transaction(client, user, category, **fields):
    payload = {
        "description": "Groceries",
        "amount": 50,
        "date": "2026-10-05",
        "type": category["type"],
        "categoryId": category["id"],
    }
    payload.update(fields)
    response = await client.post("/api/transactions", json=payload, headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()
