"""Async database configuration and session management."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from feedback_api.config import settings

database_url = settings.database_url

engine_kwargs: dict[str, Any] = {"pool_pre_ping": True}

if database_url.get_backend_name() == "sqlite":
    # aiosqlite runs each sqlite connection on its own worker thread
    engine_kwargs["connect_args"] = {"check_same_thread": False}
else:
    engine_kwargs.update(
        pool_recycle=3600,  # Recycle connections after 1 hour
        pool_size=5,
        max_overflow=10,
        connect_args={
            "server_settings": {"application_name": settings.APP_NAME},
            "command_timeout": 60,
        },
    )

# Create async engine
async_engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

# Create async session factories
AsyncSessionLocal = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=True,
    autocommit=False,
)

# Read-only session factory
AsyncSessionReadOnly = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,  # No flushing for read-only
    autocommit=False,
)


async def get_async_db() -> AsyncGenerator[AsyncSession]:
    """
    Async dependency for write operations.

    The transaction spans the request: commit on success, rollback on exception.
    """
    async with AsyncSessionLocal.begin() as session:
        yield session


async def get_async_db_read_only() -> AsyncGenerator[AsyncSession]:
    """Async dependency for read-only database operations."""
    async with AsyncSessionReadOnly() as session:
        yield session


async def dispose_engine() -> None:
    """Close all pooled connections (called on application shutdown)."""
    await async_engine.dispose()
