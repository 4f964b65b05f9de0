"""
Contactbook — Database Engine & Session Factory
================================================

What:  Async SQLAlchemy engine, session factory, declarative base, and
       lifecycle helpers used by the SQL contact repository.
How:   Creates an async engine from settings.database_url; the repository
       opens one session per operation from `async_session_factory`.
Who:   SqlAlchemyContactRepository, the application lifespan, Alembic.
When:  Engine is created at module import; sessions are created per operation.

Connection Pooling:
    SQLite files use SQLAlchemy's default async pool for the aiosqlite driver.
    Server databases (PostgreSQL via asyncpg) get an explicit pool size and
    hourly connection recycling.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from contactbook.config import settings


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        # Echo SQL queries only in DEBUG mode
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.uses_sqlite:
        options.update(pool_size=10, max_overflow=5, pool_recycle=3600)
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine: AsyncEngine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: rows stay readable after the session commits
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class to register with the shared metadata
    that Alembic and create_tables() read.
    """
    pass


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables() -> None:
    """
    What:  Creates any missing tables registered on Base.metadata.
    When:  Called during application startup when create_tables_on_startup is set.
    """
    # Registers ContactRow on Base.metadata
    from contactbook.models import contact  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
