"""
Database connection management
"""

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

from ..config import get_database_url, settings
from ..dbmodels import Base
from ..logging import get_logger

logger = get_logger(__name__)

# Process-wide connection pool
_async_engine: AsyncEngine | None = None
_async_session_local: async_sessionmaker[AsyncSession] | None = None
_initialized = False
_init_lock = threading.Lock()  # Protect initialization from race conditions


def to_async_url(database_url: str) -> str:
    """Map a database URL onto its async driver."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url


def reset_database() -> None:
    """Forget the shared engine (for tests). Call dispose_database() to close it."""
    global _async_engine, _async_session_local, _initialized
    _async_engine = None
    _async_session_local = None
    _initialized = False


async def dispose_database() -> None:
    """Close all pooled connections and reset the shared engine."""
    engine = _async_engine
    reset_database()
    if engine is not None:
        await engine.dispose()


async def check_database_connection() -> tuple[bool, str | None]:
    """
    Test the database connection and return helpful error messages.

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
        error_type = type(e).__name__

        if "does not exist" in error_str and "role" in error_str:
            db_name = get_database_url().split("/")[-1].split("?")[0]
            return False, (
                f"Cannot connect to database: {error_str}\n"
                f"This usually means:\n"
                f"  1. The database server is not running\n"
                f"  2. The database '{db_name}' doesn't exist\n"
                f"  3. The database user/role doesn't exist\n"
                f"Please check your database connection and run migrations if needed."
            )
        elif "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        elif "password authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        elif "unable to open database file" in error_str:
            return False, (
                f"Cannot open SQLite database: {error_str}\n"
                f"Please check that the database directory exists and is writable."
            )
        else:
            return False, f"Database connection error ({error_type}): {error_str}"


def init_database(database_url: str | None = None, force_reinit: bool = False) -> None:
    """Initialize the shared async connection pool.

    Thread-safe initialization using a lock to prevent race conditions
    when multiple threads attempt to initialize simultaneously.
    """
    global _async_engine, _async_session_local, _initialized

    if _initialized and not force_reinit and database_url is None:
        return

    with _init_lock:
        if _initialized and not force_reinit and database_url is None:
            return

        async_db_url = to_async_url(database_url or get_database_url())

        engine_kwargs: dict = {"echo": settings.sql_echo}
        if async_db_url.startswith("postgresql+asyncpg://"):
            engine_kwargs["pool_size"] = settings.database_pool_size
            engine_kwargs["max_overflow"] = settings.database_max_overflow

        _async_engine = create_async_engine(async_db_url, **engine_kwargs)
        # Repository results are handed back to resolvers after the session closes
        _async_session_local = async_sessionmaker(
            _async_engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

        _initialized = True
        logger.info("Database initialized", database_url=_async_engine.url.render_as_string())


def get_async_engine() -> AsyncEngine:
    """Get the shared async SQLAlchemy engine."""
    if _async_engine is None:
        init_database()
    assert _async_engine is not None
    return _async_engine


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session from the shared pool.

    Commits when the block exits normally, rolls back and re-raises otherwise.
    """
    if _async_session_local is None:
        init_database()

    if _async_session_local is None:
        raise RuntimeError("Database not initialized")

    async with _async_session_local() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_tables() -> None:
    """Create all tables from the ORM metadata (development and tests)."""
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")
