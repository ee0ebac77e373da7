"""Database initialization utilities."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from stoolpool.db.base import Base

# Register models on the metadata
import stoolpool.models  # noqa: F401

logger = logging.getLogger(__name__)


def _engine(bind: AsyncEngine | None) -> AsyncEngine:
    if bind is not None:
        return bind
    from stoolpool.db.session import engine

    return engine


async def create_tables(bind: AsyncEngine | None = None) -> None:
    """Create all database tables."""
    async with _engine(bind).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


async def drop_tables(bind: AsyncEngine | None = None) -> None:
    """Drop all database tables (use with caution)."""
    async with _engine(bind).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Database tables dropped")
