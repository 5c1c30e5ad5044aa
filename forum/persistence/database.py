"""Database connection and session management.

Provides the async engine and session factory. PostgreSQL (asyncpg) is the
production target; SQLite (aiosqlite) backs local development and tests.
"""

from pathlib import Path

from sqlalchemy import event, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import DatabaseSettings, Settings
from forum.persistence.tables import metadata
from forum.util.error import ConfigurationError

_ASYNC_DRIVERS = ("sqlite+aiosqlite", "postgresql+asyncpg")


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine

    Raises:
        ConfigurationError: If the URL does not name an async driver
    """
    database = settings.database
    if not database.url.startswith(_ASYNC_DRIVERS):
        raise ConfigurationError(
            f"Database URL must use one of {', '.join(_ASYNC_DRIVERS)}"
        )

    engine = create_async_engine(
        database.url,
        echo=settings.debug,  # Log SQL queries in debug mode
        **_pool_options(database),
    )

    if database.is_sqlite:
        _ensure_sqlite_directory(database.url)

        # SQLite only enforces foreign keys when asked to, per connection
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def _ensure_sqlite_directory(url: str) -> None:
    path = make_url(url).database
    if path and path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)


def _pool_options(database: DatabaseSettings) -> dict:
    if database.is_sqlite:
        return {}
    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": database.pool_size,
        "max_overflow": database.max_overflow,
    }


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
    """Create any missing tables.

    Used for local SQLite databases and tests; deployed databases are
    migrated with Alembic.

    Args:
        engine: Database engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
