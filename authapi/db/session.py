"""
Database session management untuk Token Auth API.
Menggunakan SQLAlchemy dengan async support.
"""

from typing import AsyncGenerator
import logging
import time
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.pool import NullPool
from sqlalchemy import event, text

from authapi.core.config import settings
from authapi.db.base import Base

logger = logging.getLogger(__name__)


def create_engine(database_url: str = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine dengan konfigurasi sesuai backend.

    Args:
        database_url: Override untuk settings.DATABASE_URL

    Returns:
        Configured AsyncEngine
    """
    database_url = database_url or settings.DATABASE_URL

    engine_args = {
        "echo": settings.DEBUG,  # SQL logging saat debug
    }

    if database_url.startswith("sqlite"):
        # SQLite tidak mendukung pool_size/max_overflow
        engine_args["connect_args"] = {"check_same_thread": False}
    elif settings.ENVIRONMENT == "test":
        engine_args["poolclass"] = NullPool
    else:
        engine_args["pool_pre_ping"] = settings.DB_POOL_PRE_PING
        engine_args["pool_size"] = settings.DB_POOL_SIZE
        engine_args["max_overflow"] = settings.DB_MAX_OVERFLOW
        engine_args["pool_timeout"] = 30
        engine_args["pool_recycle"] = 3600

    engine = create_async_engine(database_url, **engine_args)

    if settings.DEBUG:
        @event.listens_for(engine.sync_engine, "connect")
        def receive_connect(dbapi_connection, connection_record):
            """Log new connections."""
            logger.debug(f"New database connection established: {connection_record}")

    return engine


# Create global engine instance
engine = create_engine()

# Create session factory
SessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Don't expire objects after commit
    autoflush=False,
)


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager untuk database session.
    Useful untuk non-FastAPI contexts seperti scripts.

    Example:
        async with get_db_context() as db:
            ...
    """
    async with SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db(create_tables: bool = None) -> None:
    """
    Initialize database.
    - Test connection
    - Create tables jika DB_CREATE_TABLES aktif
    """
    if create_tables is None:
        create_tables = settings.DB_CREATE_TABLES

    # Import models supaya ter-register di metadata
    from authapi import models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            logger.info("Database connection successful")

            if create_tables:
                await conn.run_sync(Base.metadata.create_all)
                logger.info("Database tables ensured")

    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


async def close_db() -> None:
    """
    Close database connections.
    Should be called on application shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")


async def check_database_health(session: AsyncSession) -> dict:
    """
    Check database health dan return metrics.

    Args:
        session: Database session

    Returns:
        Dictionary dengan health metrics
    """
    health_info = {
        "connected": False,
        "response_time_ms": None,
        "error": None
    }

    try:
        start_time = time.time()
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        response_time = (time.time() - start_time) * 1000

        health_info["connected"] = True
        health_info["response_time_ms"] = round(response_time, 2)

    except Exception as e:
        health_info["error"] = str(e)
        logger.error(f"Database health check failed: {e}")

    return health_info
