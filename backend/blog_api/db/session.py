"""
Database session management.

WHY: Async database sessions are required for FastAPI's async/await pattern.
Using a context manager ensures proper connection cleanup and transaction management.
"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog_api.core.config import settings
from blog_api.models import Base


logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    # pool_size/max_overflow only apply to server databases; SQLite's
    # aiosqlite pool rejects them.
    options: Dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if not settings.is_sqlite:
        options.update(pool_size=10, max_overflow=20)
    return options


# Create async engine
engine = create_async_engine(settings.async_database_url, **_engine_options())

# Create session factory
# WHY: expire_on_commit=False prevents lazy-loading issues after commit.
# autoflush=False gives explicit control over when SQL is emitted: DAOs
# flush in save().
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get database session.

    WHY: Each request gets its own session, committed when the handler
    returns and rolled back if it raises (including business rejections).

    Yields:
        AsyncSession: Database session for the request
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(db_engine: AsyncEngine = engine) -> None:
    """
    Create all tables that don't exist yet.

    WHAT: Schema is created straight from the models; there is no
    migration history.

    Args:
        db_engine: Engine to create tables on (the application engine by default)
    """
    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")
