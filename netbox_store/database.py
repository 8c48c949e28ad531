"""Database session factory and engine initialization.

Provides async SQLAlchemy engine and session factory (asyncpg for Postgres,
aiosqlite for local/test databases).
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from netbox_config.settings import SUPPORTED_DB_DRIVERS, Settings
from netbox_store.models import Base

# Global engine and session factory
_engine: AsyncEngine | None = None
_async_session_factory: async_sessionmaker | None = None


def create_engine_for_url(database_url: str, settings: Settings | None = None) -> AsyncEngine:
    """Create an async engine for ``database_url``.

    Pool sizing only applies to Postgres; SQLite picks its own pool.

    Raises:
        ValueError: URL does not use asyncpg or aiosqlite
    """
    if not database_url.startswith(SUPPORTED_DB_DRIVERS):
        raise ValueError(
            f"Database URL must use an async driver (asyncpg or aiosqlite). "
            f"Got: {database_url.split('://')[0]}"
        )

    settings = settings or Settings()
    if database_url.startswith("sqlite+aiosqlite://"):
        return create_async_engine(database_url, echo=settings.DB_ECHO)

    return create_async_engine(
        database_url,
        echo=settings.DB_ECHO,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=30,
        pool_recycle=3600,  # Recycle connections after 1 hour
    )


def get_engine(database_url: str | None = None) -> AsyncEngine:
    """Get or create the process-wide async engine.

    Args:
        database_url: Database connection URL (defaults to settings)

    Returns:
        AsyncEngine instance
    """
    global _engine

    if _engine is None:
        settings = Settings()
        _engine = create_engine_for_url(database_url or settings.DATABASE_URL, settings)

    return _engine


def get_session_factory(database_url: str | None = None) -> async_sessionmaker:
    """Get or create async session factory.

    Args:
        database_url: Database connection URL

    Returns:
        async_sessionmaker instance
    """
    global _async_session_factory

    if _async_session_factory is None:
        engine = get_engine(database_url)
        _async_session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Don't expire objects after commit
            autoflush=False,
        )

    return _async_session_factory


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create all tables that do not exist yet (dev/test helper; use Alembic in production)."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db_connections() -> None:
    """Close database connections.

    Call this during application shutdown.
    """
    global _engine, _async_session_factory

    if _engine:
        await _engine.dispose()
        _engine = None

    _async_session_factory = None

