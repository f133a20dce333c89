#!/usr/bin/env python
"""
Script untuk inisialisasi database Token Auth API.
Membuat semua tabel lalu memverifikasi hasilnya.
Usage: python scripts/init_db.py [--drop]
"""

import argparse
import asyncio
import sys
from pathlib import Path
import logging

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from sqlalchemy import func, inspect, select

from authapi.core.config import settings
from authapi.db.base import Base
from authapi.db.session import engine, get_db_context, init_db
from authapi.models import PersonalAccessToken, User

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

REQUIRED_TABLES = {"users", "personal_access_tokens"}


async def drop_tables():
    """Drop semua tabel. Semua user dan token akan hilang."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Dropped all database tables")


async def verify_tables() -> bool:
    """Verify that all required tables exist, lalu log jumlah row-nya."""
    async with get_db_context() as session:
        existing_tables = set(
            await session.run_sync(
                lambda sync_session: inspect(sync_session.connection()).get_table_names()
            )
        )

        missing_tables = REQUIRED_TABLES - existing_tables
        if missing_tables:
            logger.warning(f"Missing tables: {missing_tables}")
            return False

        for model in (User, PersonalAccessToken):
            result = await session.execute(select(func.count()).select_from(model))
            logger.info(f"Table {model.__tablename__}: {result.scalar_one()} row(s)")

    logger.info("All required tables exist")
    return True


async def main(drop: bool = False):
    """Main initialization function."""
    logger.info("=== Token Auth API Database Initialization ===")

    try:
        if drop:
            logger.info("Step 0: Dropping existing tables...")
            await drop_tables()

        logger.info("Step 1: Creating database tables...")
        await init_db(create_tables=True)

        logger.info("Step 2: Verifying tables...")
        if not await verify_tables():
            raise RuntimeError("Table verification failed")

        logger.info("Database initialization completed successfully!")
        logger.info("Start the API with 'uvicorn authapi.main:app --reload'")

    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Initialize the Token Auth API database")
    parser.add_argument("--drop", action="store_true", help="Drop existing tables first")
    args = parser.parse_args()

    if not settings.DATABASE_URL:
        logger.error("DATABASE_URL not configured. Please set it in .env file")
        sys.exit(1)

    asyncio.run(main(drop=args.drop))
