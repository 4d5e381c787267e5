"""
Database Initialization Script
Creates the database if needed and runs the OTP migrations
"""

import asyncio
import asyncpg
import sys
from pathlib import Path
from datetime import datetime

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from otpgate.core.config import settings

import logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent.parent / "otpgate" / "db" / "migrations"


async def connect(database: str) -> asyncpg.Connection:
    return await asyncpg.connect(
        host=settings.POSTGRES_HOST,
        port=settings.POSTGRES_PORT,
        user=settings.POSTGRES_USER,
        password=settings.POSTGRES_PASSWORD,
        database=database,
        ssl=settings.POSTGRES_SSL or None
    )


async def create_database():
    """Create database if it doesn't exist"""
    conn = await connect("postgres")

    try:
        exists = await conn.fetchval(
            "SELECT 1 FROM pg_database WHERE datname = $1", settings.POSTGRES_DB
        )

        if exists:
            logger.info(f"Database '{settings.POSTGRES_DB}' already exists")
        else:
            logger.info(f"Creating database '{settings.POSTGRES_DB}'...")
            await conn.execute(f'CREATE DATABASE "{settings.POSTGRES_DB}"')
            logger.info(f"Database '{settings.POSTGRES_DB}' created successfully")

    finally:
        await conn.close()


async def run_migrations():
    """Run all migration files in filename order"""
    conn = await connect(settings.POSTGRES_DB)

    try:
        for filepath in sorted(MIGRATIONS_DIR.glob("*.sql")):
            logger.info(f"Running migration: {filepath.name}")
            try:
                await conn.execute(filepath.read_text(encoding="utf-8"))
            except asyncpg.PostgresError as e:
                logger.error(f"Migration failed: {filepath.name}: {e}")
                raise
            logger.info(f"Migration completed: {filepath.name}")

        count = await conn.fetchval("SELECT COUNT(*) FROM otps")
        logger.info(f"otps table ready ({count} rows)")

    finally:
        await conn.close()


async def main():
    """Main initialization function"""
    try:
        logger.info("=" * 80)
        logger.info("OTPGATE DATABASE INITIALIZATION")
        logger.info("=" * 80)
        logger.info(f"Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        logger.info(f"Host: {settings.POSTGRES_HOST}:{settings.POSTGRES_PORT}")
        logger.info(f"Database: {settings.POSTGRES_DB}")

        await create_database()
        await run_migrations()

        logger.info("=" * 80)
        logger.info("DATABASE INITIALIZATION COMPLETE!")
        logger.info("=" * 80)

    except Exception as e:
        logger.error(f"DATABASE INITIALIZATION FAILED: {e}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
