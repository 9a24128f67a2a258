"""Test configuration and fixtures."""

import asyncio
import os
from collections.abc import AsyncGenerator

# Must be set before feedback_api is imported: the module-level engine is
# built from it. CI/Docker may point this at postgres instead.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tests.fixtures import create_error_app  # noqa: E402


@pytest_asyncio.fixture(scope="function")
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """
    Create a test database engine.

    Strategy:
    - Local/Unit testing: SQLite in-memory database (no postgres required)
    - CI/Docker: whatever DATABASE_URL points at
    """
    test_db_url = os.environ["DATABASE_URL"]
    print(f"TEST DB: Using {test_db_url}")

    engine = create_async_engine(test_db_url, echo=False)

    yield engine

    try:
        await engine.dispose()
        await asyncio.sleep(0.01)  # Brief pause for async cleanup
    except Exception as e:
        print(f"Warning: Error disposing test engine: {e}")


@pytest_asyncio.fixture(scope="function")
async def async_session(
    async_engine: AsyncEngine,
) -> AsyncGenerator[AsyncSession]:
    """
    Create database session for testing with transaction rollback.

    After the test completes, all changes are rolled back.
    """
    connection = await async_engine.connect()
    transaction = await connection.begin()

    async_session_maker = async_sessionmaker(
        bind=connection,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    session = async_session_maker()

    yield session

    # Rollback everything
    await session.close()
    await transaction.rollback()
    await connection.close()


@pytest.fixture
def error_app() -> FastAPI:
    """Application whose endpoints raise each kind of failure."""
    return create_error_app()


@pytest_asyncio.fixture
async def error_client(error_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client for the error app.

    Starlette re-raises exceptions served by the catch-all handler after the
    response is sent; raise_app_exceptions=False lets the test read it.
    """
    async with AsyncClient(
        transport=ASGITransport(app=error_app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client
