"""Database configuration and session management.

Provides async SQLAlchemy engine and session factory builders. Engines are
built explicitly by the application factory rather than at import time, so
tests can point the service at their own database.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from product_catalog.infrastructure.config import Settings


class Base(DeclarativeBase):
    """Base class for catalog models."""


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database.

    Args:
        settings: Application settings.

    Returns:
        Async SQLAlchemy engine.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=settings.db_pool_pre_ping,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to an engine.

    Args:
        engine: Async engine.

    Returns:
        Session factory producing AsyncSession instances.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create all catalog tables that do not exist yet.

    Args:
        engine: Async engine.
    """
    # Imported for its side effect of registering tables on Base.metadata
    from product_catalog.catalog import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(session_factory: async_sessionmaker[AsyncSession]) -> bool:
    """Check database connectivity.

    Args:
        session_factory: Session factory.

    Returns:
        True when a trivial query succeeds.
    """
    async with session_factory() as session:
        result = await session.execute(text("SELECT 1"))
        return result.scalar_one() == 1


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Yield a session that commits on success and rolls back on error.

    Args:
        session_factory: Session factory.

    Yields:
        AsyncSession for database operations.
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
