"""
Database connection management
"""

import os
import threading
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import settings
from ..dbmodels import Base
from ..logging import get_logger

logger = get_logger(__name__)

# Shared connection pool, owned by whoever calls init_database()
_async_engine: AsyncEngine | None = None
_async_session_local: async_sessionmaker[AsyncSession] | None = None
_initialized = False
_init_lock = threading.Lock()


def get_database_url() -> str:
    """Get database URL, checking environment variables first for test compatibility."""
    return os.getenv("LIBRARY_DATABASE_URL") or settings.database_url


def to_async_url(database_url: str) -> str:
    """Map a plain driver URL onto its asyncio driver."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url


def create_engine_for_url(database_url: str, echo: bool | None = None) -> AsyncEngine:
    """Create an async engine; pool sizing only applies to server databases."""
    async_url = to_async_url(database_url)
    echo = settings.sql_echo if echo is None else echo
    if async_url.startswith("sqlite"):
        return create_async_engine(async_url, echo=echo)
    return create_async_engine(
        async_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
        echo=echo,
    )


def reset_database() -> None:
    """Forget the shared engine (for tests). Does not dispose it."""
    global _async_engine, _async_session_local, _initialized
    _async_engine = None
    _async_session_local = None
    _initialized = False


def init_database(database_url: str | None = None, force_reinit: bool = False) -> None:
    """Initialize the shared async engine and session factory.

    Thread-safe; repeated calls are no-ops unless ``force_reinit`` is set or
    an explicit URL is passed.
    """
    global _async_engine, _async_session_local, _initialized

    if _initialized and not force_reinit and database_url is None:
        return

    with _init_lock:
        if _initialized and not force_reinit and database_url is None:
            return

        db_url = database_url or get_database_url()
        _async_engine = create_engine_for_url(db_url)
        _async_session_local = async_sessionmaker(
            _async_engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
        _initialized = True
        logger.info("Database initialized", database_url=_redact(db_url))


def get_async_engine() -> AsyncEngine:
    """Get the shared async SQLAlchemy engine."""
    if _async_engine is None:
        init_database()
    if _async_engine is None:
        raise RuntimeError("Database not initialized")
    return _async_engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session factory."""
    if _async_session_local is None:
        init_database()
    if _async_session_local is None:
        raise RuntimeError("Database not initialized")
    return _async_session_local


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session from the shared pool; commits on success."""
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create the Books and Authors tables if they do not exist."""
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", tables=sorted(Base.metadata.tables))


async def dispose_database() -> None:
    """Close all pooled connections and forget the shared engine."""
    if _async_engine is not None:
        await _async_engine.dispose()
    reset_database()


async def test_database_connection() -> tuple[bool, str | None]:
    """
    Test the database connection and return a helpful error message.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _async_engine is None:
        return False, "Database engine not initialized"

    try:
        async with _async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        if "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        if "password authentication failed" in error_str:
            return False, f"Database authentication failed: {error_str}"
        return False, f"Database connection error ({type(e).__name__}): {error_str}"


def _redact(database_url: str) -> str:
    """Hide the password component of a database URL for logging."""
    scheme, sep, rest = database_url.partition("://")
    if not sep or "@" not in rest:
        return database_url
    credentials, host = rest.rsplit("@", 1)
    user = credentials.split(":", 1)[0]
    return f"{scheme}://{user}:***@{host}"
