"""
Database connection management.

DatabaseContext is the explicit client handle passed to every data-access
call: it bundles the async engine, the session factory and the change feed
that write paths publish to after committing.

Dependencies: sqlalchemy, backend.configs, backend.core.realtime
System role: Database connection lifecycle management
"""

import logging
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from backend.boundary.db.base import Base
from backend.configs.database import DatabaseSettings
from backend.core.realtime.change_feed import ChangeFeed

logger = logging.getLogger(__name__)


def get_async_engine(db_config: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    PostgreSQL gets a sized connection pool with pre-ping to detect stale
    connections early. SQLite uses the driver defaults.

    Args:
        db_config: Database settings

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    if db_config.is_sqlite:
        return create_async_engine(
            db_config.async_database_url,
            echo=db_config.echo_sql,
        )

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


class DatabaseContext:
    """
    Explicit database client handle.

    Attributes:
        engine: Async SQLAlchemy engine
        session_factory: async_sessionmaker bound to engine
        change_feed: Change bus for real-time snapshot subscriptions
    """

    def __init__(self, engine: AsyncEngine, change_feed: ChangeFeed | None = None) -> None:
        """
        Initialize context around an existing engine.

        Args:
            engine: Async engine to bind sessions to
            change_feed: Change feed to share (new one if None)
        """
        self.engine = engine
        self.session_factory = async_sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False,
        )
        self.change_feed = change_feed or ChangeFeed()

    @classmethod
    def from_settings(cls, db_config: DatabaseSettings) -> "DatabaseContext":
        """Build a context from database settings."""
        return cls(get_async_engine(db_config))

    def session(self) -> AsyncSession:
        """
        Open a new session.

        Usage:
            async with ctx.session() as session:
                ...
        """
        return self.session_factory()

    async def create_all(self) -> None:
        """Create all tables (development and tests)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def ping(self) -> None:
        """
        Run a trivial query.

        Raises:
            SQLAlchemyError: If the database is unreachable
        """
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()

