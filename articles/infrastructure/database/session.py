"""SQLAlchemy database engine, session factory and connectivity helpers."""

import logging
from collections.abc import Awaitable, Callable

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from articles.infrastructure.database.base import Base

logger = logging.getLogger(__name__)

HealthCheck = Callable[[], Awaitable[None]]


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine; its connection pool is shared by all requests."""
    return create_async_engine(
        _get_async_url(database_url),
        echo=echo,
        pool_pre_ping=True,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create the schema if it does not exist yet. No migrations are run."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


def make_ping(engine: AsyncEngine) -> HealthCheck:
    """Return a health-check callback that round-trips ``SELECT 1``."""

    async def ping() -> None:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    return ping
