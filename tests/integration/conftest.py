"""Integration test fixtures.

Runs the SQLAlchemy store against a SQLite in-memory database through
aiosqlite. StaticPool keeps one shared connection so every session the
store opens sees the same in-memory database.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from user_store.infrastructure.persistence.database import (
    create_schema,
    create_session_factory,
    drop_schema,
)
from user_store.infrastructure.repositories import SqlAlchemyUserStore

# Test database URL (SQLite in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with the schema in place."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    await create_schema(engine)

    yield engine

    await drop_schema(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine: AsyncEngine):
    """Create a test session factory."""
    return create_session_factory(test_engine)


@pytest_asyncio.fixture
async def store(test_session_factory) -> SqlAlchemyUserStore:
    """SqlAlchemyUserStore bound to the in-memory database."""
    return SqlAlchemyUserStore(test_session_factory)
