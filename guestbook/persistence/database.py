"""Database connection and session management.

Provides async database engine and session factory. PostgreSQL (asyncpg)
in production, SQLite (aiosqlite) for local runs and tests.
"""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from guestbook.config import Settings
from guestbook.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    url = make_url(settings.database_url)

    if url.get_backend_name() == "sqlite":
        # SQLite uses a static/singleton pool; pool sizing does not apply
        return create_async_engine(url, echo=settings.debug)

    return create_async_engine(
        url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet.

    For SQLite development databases and tests; PostgreSQL is managed by
    Alembic migrations.
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
