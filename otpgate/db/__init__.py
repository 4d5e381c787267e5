"""
Database Module
Migrations and repositories
"""

# Database connection is in otpgate/core/database
from otpgate.core.database import (
    init_db,
    close_db,
    get_db_pool,
    get_db_connection
)

__all__ = [
    "init_db",
    "close_db",
    "get_db_pool",
    "get_db_connection"
]
