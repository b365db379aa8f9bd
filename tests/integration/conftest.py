"""Integration test fixtures for database operations.

These fixtures require a PostgreSQL database; set TEST_DATABASE_URL to run
them. Migrations are applied once per test and tables are truncated after.
"""

import asyncio
import os
from collections.abc import AsyncGenerator

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from src.louvores.core import db
from src.louvores.core.config import get_settings
from src.louvores.core.db import run_migrations_sync

TABLES = (
    "service_song_items",
    "songs",
    "scheduled_functions",
    "schedules",
    "person_tags",
    "role_tags",
    "invitations",
    "access_records",
    "people",
)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.environ.get("TEST_DATABASE_URL"):
        return
    skip = pytest.mark.skip(reason="TEST_DATABASE_URL not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create test database engine and ensure migrations are applied."""
    await db.dispose_engine()

    settings = get_settings()
    test_engine = create_async_engine(settings.database_url, poolclass=NullPool)

    await asyncio.to_thread(run_migrations_sync, "head")

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.execute(text(f"TRUNCATE {', '.join(TABLES)} CASCADE"))
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does NOT auto-commit; services and tests commit explicitly.
    """
    async with AsyncSession(engine, expire_on_commit=False, autoflush=False) as session:
        yield session
