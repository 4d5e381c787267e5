"""
Database Connection Module
Async PostgreSQL connection pool using asyncpg
"""

import asyncpg
import logging
from typing import Optional
from contextlib import asynccontextmanager

from otpgate.core.config import settings

logger = logging.getLogger(__name__)

# Global connection pool
_pool: Optional[asyncpg.Pool] = None


async def init_db() -> asyncpg.Pool:
    """
    Initialize database connection pool

    Returns the existing pool if it was already created.
    """
    global _pool

    if _pool is not None:
        return _pool

    try:
        logger.info("=" * 60)
        logger.info("CONNECTING TO OTP DATABASE")
        logger.info("=" * 60)
        logger.info(f"Host: {settings.POSTGRES_HOST}")
        logger.info(f"Port: {settings.POSTGRES_PORT}")
        logger.info(f"Database: {settings.POSTGRES_DB}")
        logger.info(f"User: {settings.POSTGRES_USER}")

        _pool = await asyncpg.create_pool(
            host=settings.POSTGRES_HOST,
            port=settings.POSTGRES_PORT,
            user=settings.POSTGRES_USER,
            password=settings.POSTGRES_PASSWORD,
            database=settings.POSTGRES_DB,
            min_size=settings.POSTGRES_MIN_POOL_SIZE,
            max_size=settings.POSTGRES_MAX_POOL_SIZE,
            ssl=settings.POSTGRES_SSL or None,
            command_timeout=60,
        )

        # Test connection
        async with _pool.acquire() as conn:
            version = await conn.fetchval("SELECT version()")
            logger.info(f"Connected to PostgreSQL")
            logger.info(f"Version: {version[:50]}...")

        logger.info("=" * 60)
        logger.info("DATABASE CONNECTION POOL INITIALIZED")
        logger.info(f"Pool size: {settings.POSTGRES_MIN_POOL_SIZE}-{settings.POSTGRES_MAX_POOL_SIZE}")
        logger.info("=" * 60)

        return _pool

    except Exception as e:
        logger.error(f"Failed to connect to database: {e}")
        raise


async def close_db():
    """Close database connection pool"""
    global _pool

    if _pool is not None:
        logger.info("Closing database connection pool...")
        await _pool.close()
        _pool = None
        logger.info("Database connection pool closed")


def get_db_pool() -> asyncpg.Pool:
    """Get the database connection pool"""
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_db() first.")
    return _pool


@asynccontextmanager
async def get_db_connection():
    """
    Get a database connection from the pool

    Usage:
        async with get_db_connection() as conn:
            row = await conn.fetchrow("SELECT * FROM otps LIMIT 1")
    """
    pool = get_db_pool()
    async with pool.acquire() as connection:
        yield connection
