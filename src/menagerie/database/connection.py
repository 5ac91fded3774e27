"""
Database connection management

One async engine and session factory are shared by the whole process. They
are created lazily on first use, or explicitly by ``init_database`` (the API
lifespan and the test fixtures).
"""

import os
import threading
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)

ASYNC_DRIVERS = {
    "postgresql://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


@dataclass
class _Pool:
    engine: AsyncEngine
    sessions: async_sessionmaker[AsyncSession]


_pool: _Pool | None = None
_pool_lock = threading.Lock()


def get_database_url() -> str:
    """Database URL from ``MENAGERIE_DATABASE_URL``, falling back to settings."""
    return os.getenv("MENAGERIE_DATABASE_URL") or settings.database_url


def to_async_url(db_url: str) -> str:
    """Map a plain database URL onto its async driver."""
    for prefix, async_prefix in ASYNC_DRIVERS.items():
        if db_url.startswith(prefix):
            return async_prefix + db_url[len(prefix) :]
    return db_url


def _engine_options(async_url: str) -> dict[str, Any]:
    if async_url.startswith("sqlite"):
        # SQLite pools do not accept sizing arguments
        return {"echo": settings.sql_echo}
    return {
        "echo": settings.sql_echo,
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
    }


def init_database(database_url: str | None = None, force_reinit: bool = False) -> None:
    """Create the shared pool.

    An already created pool is kept unless ``force_reinit`` is set or an
    explicit ``database_url`` is given.
    """
    global _pool

    with _pool_lock:
        if _pool is not None and not force_reinit and database_url is None:
            return

        async_url = to_async_url(database_url or get_database_url())
        engine = create_async_engine(async_url, **_engine_options(async_url))
        _pool = _Pool(
            engine=engine,
            sessions=async_sessionmaker(engine, autoflush=False, expire_on_commit=False),
        )
        logger.info("Database initialized", driver=engine.url.drivername)


def _get_pool() -> _Pool:
    if _pool is None:
        init_database()
    if _pool is None:
        raise RuntimeError("Database not initialized")
    return _pool


def reset_database() -> None:
    """Forget the shared pool without closing it (for tests)."""
    global _pool
    _pool = None


async def dispose_database() -> None:
    """Close every pooled connection and forget the pool."""
    if _pool is not None:
        await _pool.engine.dispose()
    reset_database()


async def test_database_connection() -> tuple[bool, str | None]:
    """
    Run ``SELECT 1`` against the shared engine.

    Returns:
        tuple: (success, error message for the startup log)
    """
    if _pool is None:
        return False, "Database engine not initialized"

    try:
        async with _pool.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        reason = str(e)
        if "Connection refused" in reason or "could not connect" in reason:
            return False, f"Database server unreachable: {reason}"
        if "password authentication failed" in reason:
            return False, f"Database credentials rejected: {reason}"
        return False, f"Database connection error ({type(e).__name__}): {reason}"

    return True, None


async def create_schema() -> None:
    """Create all tables that do not exist yet."""
    from ..dbmodels import Base

    async with _get_pool().engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured")


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Session from the shared pool; commits on success, rolls back on error."""
    async with _get_pool().sessions() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
