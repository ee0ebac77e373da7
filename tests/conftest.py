"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from stoolpool.db.init_db import create_tables, drop_tables
from stoolpool.services.history import InMemoryHistoryRepository, SqlHistoryRepository


# Use SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def async_engine():
    """Create async test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    await create_tables(engine)

    yield engine

    await drop_tables(engine)
    await engine.dispose()


@pytest.fixture(scope="function")
async def async_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async database session for tests."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest.fixture
def sql_repository(async_session: AsyncSession) -> SqlHistoryRepository:
    """History repository over the test database."""
    return SqlHistoryRepository(async_session)


@pytest.fixture
def memory_repository() -> InMemoryHistoryRepository:
    """Empty in-memory history repository."""
    return InMemoryHistoryRepository()


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for date-windowed statistics."""
    return datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def critical_answers() -> list:
    """Answers scoring well into the critical tier."""
    return [
        "Black",
        "Watery",
        "Very Foul",
        {"before": 5, "during": 7, "after": 3},
        "Float: Foamy, Layered",
        "unusual smell",
    ]


@pytest.fixture
def clear_answers() -> list:
    """Answers scoring zero."""
    return [None, "Formed", "Normal", None, "Sink: Sank fast", None]
