"""Async database configuration.

Provides:
- Async SQLAlchemy engine and session factory
- Per-unit-of-work sessions that commit on success and roll back on error
- Table creation for development databases
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import HTTPException
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from storehive.config import settings
from storehive.infra.logging import get_logger
from storehive.models import Base

logger = get_logger(__name__)

# Global engine (initialized on first use)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _engine_options(database_url: str) -> dict[str, Any]:
    """Pool options for the configured backend.

    SQLite uses a single-file or in-memory database and rejects pool sizing.
    """
    if make_url(database_url).get_backend_name() == "sqlite":
        return {}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_pool_max_overflow,
        "pool_pre_ping": True,  # Verify connections before use
        "pool_recycle": 1800,  # Recycle connections after 30 min
    }


def get_engine() -> AsyncEngine:
    """Get or create the async database engine."""
    global _engine

    if _engine is None:
        logger.info(
            "Creating database engine",
            backend=make_url(settings.database_url).get_backend_name(),
        )

        _engine = create_async_engine(
            settings.database_url,
            echo=settings.debug,  # Log SQL in debug mode
            **_engine_options(settings.database_url),
        )

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_factory


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get an async database session scoped to one unit of work.

    Yields:
        AsyncSession, committed when the block exits cleanly

    Example:
        async with get_db_session() as session:
            service = HiveService(session, user_context)
            await service.create_hive(request)
    """
    factory = get_session_factory()
    session = factory()

    try:
        yield session
        await session.commit()

    except HTTPException as e:
        # 400/404/409 responses raised by routes while the session is open
        await session.rollback()
        logger.info("Database session rolled back", status_code=e.status_code)
        raise

    except Exception as e:
        await session.rollback()
        logger.error("Database session error", error=str(e), error_type=type(e).__name__)
        raise

    finally:
        await session.close()


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create every table declared on ``Base.metadata`` that is missing."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", tables=sorted(Base.metadata.tables))


async def close_db_engine() -> None:
    """Close the database engine and all connections.

    Call this during application shutdown.
    """
    global _engine, _session_factory

    if _engine is not None:
        logger.info("Closing database engine")
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def verify_db_connection() -> bool:
    """Verify database connectivity.

    Returns:
        True if connection successful, False otherwise
    """
    try:
        async with get_db_session() as session:
            await session.execute(text("SELECT 1"))
            logger.info("Database connection verified")
            return True
    except Exception as e:
        logger.error("Database connection failed", error=str(e))
        return False
