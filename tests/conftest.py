import os
from typing import AsyncGenerator, Dict

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.core.models  # noqa: F401  registers every table on Base.metadata
from app.auth.security import create_access_token
from app.db.session import Base, get_db
from app.main import app as fastapi_app


TEST_DATABASE_URL = "sqlite+aiosqlite://"


def auth_headers(role: str = "ADMIN", permissions: Dict[str, Dict[str, bool]] = None) -> Dict[str, str]:
    token = create_access_token("user-1", role, permissions)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    """Fresh in-memory database per test; every request gets its own session on it."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield factory

    fastapi_app.dependency_overrides.clear()
    await engine.dispose()


@pytest.fixture()
async def db_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture()
async def anon_client(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncClient, None]:
    """Client without credentials."""
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture()
async def client(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncClient, None]:
    """Client authenticated as ADMIN."""
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test", headers=auth_headers()) as ac:
        yield ac


@pytest.fixture()
async def school_class(client: AsyncClient) -> Dict:
    response = await client.post("/api/class", json={"name": "Six"})
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture()
async def academic_session(client: AsyncClient) -> Dict:
    response = await client.post(
        "/api/sessions",
        json={"name": "2024", "startDate": "2024-01-01", "endDate": "2024-12-31", "isCurrent": True},
    )
    assert response.status_code == 201
    return response.json()["data"]
