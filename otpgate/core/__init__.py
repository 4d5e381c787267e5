"""
Core Module
Configuration and database
"""

from otpgate.core.config import settings
from otpgate.core.database import (
    init_db,
    close_db,
    get_db_pool,
    get_db_connection
)

__all__ = [
    # Config
    "settings",

    # Database
    "init_db",
    "close_db",
    "get_db_pool",
    "get_db_connection"
]
