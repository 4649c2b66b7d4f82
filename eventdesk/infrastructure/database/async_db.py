from __future__ import annotations

"""
Asynchronous Database Utilities Module

This module owns the application's async SQLAlchemy engine and session
factory. PostgreSQL is reached through asyncpg; local development and the
test-suite use SQLite through aiosqlite.

**Security Note**: Never log DATABASE_URL, it may carry credentials.

Key Components:
    - engine: The asynchronous SQLAlchemy engine.
    - AsyncSessionFactory: A factory for creating asynchronous database sessions.
    - create_db_and_tables: Creates all tables registered on SQLModel.metadata.
    - check_database_health: Runs ``SELECT 1`` against the database.
"""

import time
from typing import Any, Dict

import structlog
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql import text
from sqlmodel import SQLModel
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

import eventdesk.domain.entities  # noqa: F401  registers tables on SQLModel.metadata
from eventdesk.core.config.settings import settings

logger = structlog.get_logger(__name__)


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine suited to the configured backend.

    In-memory SQLite needs a single shared connection, otherwise every
    session would see its own empty database.
    """
    url = make_url(database_url)
    kwargs: Dict[str, Any] = {"echo": echo, "future": True}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(
            pool_size=settings.POSTGRES_POOL_SIZE,
            max_overflow=settings.POSTGRES_MAX_OVERFLOW,
            pool_timeout=settings.POSTGRES_POOL_TIMEOUT,
            pool_pre_ping=True,
        )

    return create_async_engine(url, **kwargs)


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG and settings.APP_ENV == "development")

AsyncSessionFactory: async_sessionmaker[AsyncSession] = async_sessionmaker(
    bind=engine, class_=AsyncSession, expire_on_commit=False
)


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type(OperationalError),
    reraise=True,
)
async def create_db_and_tables(target: AsyncEngine | None = None) -> None:
    """
    Creates database tables with logging.

    Retries on ``OperationalError`` so a database that is still starting up
    does not abort application startup.
    """
    start_time = time.time()
    async with (target or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info(
        "database_tables_created",
        execution_time=time.time() - start_time,
        tables=list(SQLModel.metadata.tables.keys()),
    )


async def run_probe_query(session: AsyncSession) -> int:
    """Executes ``SELECT 1`` and returns the scalar result."""
    result = await session.execute(text("SELECT 1"))
    return int(result.scalar_one())


async def check_database_health() -> bool:
    """
    Performs a health check on the database connection.

    Returns:
        bool: True if the database answered the probe query, False otherwise.
    """
    start_time = time.time()
    try:
        async with AsyncSessionFactory() as session:
            await run_probe_query(session)
        logger.info("database_health_check_success", execution_time=time.time() - start_time)
        return True
    except Exception as e:
        logger.error(
            "database_health_check_failed",
            error=str(e),
            error_type=type(e).__name__,
            execution_time=time.time() - start_time,
        )
        return False


async def dispose_engine() -> None:
    await engine.dispose()
    logger.info("database_engine_disposed")
