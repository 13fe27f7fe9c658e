from typing import Any, AsyncGenerator, Dict

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import settings


def _engine_options(database_url: str) -> Dict[str, Any]:
    """Pool settings for server databases; SQLite (local runs, tests) keeps the driver defaults."""
    if make_url(database_url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    # pool_pre_ping: drop connections the server closed while idle.
    return {"pool_pre_ping": True, "pool_recycle": 300}


engine = create_async_engine(settings.database_url, echo=False, **_engine_options(settings.database_url))

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """One session per request; uncommitted work is rolled back when the session closes."""
    async with AsyncSessionLocal() as session:
        yield session


async def create_all() -> None:
    """Create missing tables at startup. Column changes on existing tables are not applied."""
    import app.core.models  # noqa: F401  registers every mapped table on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
