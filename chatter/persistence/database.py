"""PostgreSQL engine and unit-of-work sessions (SQLAlchemy asyncio + asyncpg)."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from chatter.config import DatabaseSettings


def create_engine(settings: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the connection pool for ``settings.url``."""
    return create_async_engine(
        settings.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories flush explicitly; rows stay readable after commit
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def unit_of_work(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Session whose writes commit together, or not at all.

    Commits when the block exits normally and rolls back when it raises,
    so a failed request leaves no partial mutation behind.
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logfire.warn("Session rolled back", error=str(e))
            raise
        await session.commit()
