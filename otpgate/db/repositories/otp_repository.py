"""
OTP Repository
Storage operations for otps table
"""

import asyncio
import asyncpg
from typing import List, Optional, Protocol
import logging

from otpgate.models.otp import OTPRecord
from otpgate.exceptions.custom_exceptions import StorageException

logger = logging.getLogger(__name__)


class OTPRepository(Protocol):
    """Append-only OTP store with newest-record lookup"""

    async def insert(self, identifier: str, otp: str, created_at: int) -> OTPRecord:
        ...

    async def get_latest(self, identifier: str) -> Optional[OTPRecord]:
        ...


class PostgresOTPRepository:
    """Repository for OTP database operations"""

    def __init__(self, db_pool: asyncpg.Pool):
        self.db = db_pool

    # ========================================================================
    # CREATE
    # ========================================================================

    async def insert(self, identifier: str, otp: str, created_at: int) -> OTPRecord:
        """Append a new OTP entry"""
        query = """
            INSERT INTO otps (identifier, otp, created_at)
            VALUES ($1, $2, $3)
            RETURNING identifier, otp, created_at
        """

        try:
            async with self.db.acquire() as conn:
                row = await conn.fetchrow(query, identifier, otp, created_at)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, asyncio.TimeoutError, OSError) as e:
            raise StorageException("Failed to store OTP", details=str(e)) from e

        return OTPRecord(**dict(row))

    # ========================================================================
    # READ
    # ========================================================================

    async def get_latest(self, identifier: str) -> Optional[OTPRecord]:
        """
        Get the most recently created OTP for an identifier

        Ties on created_at go to the row inserted last.
        """
        query = """
            SELECT identifier, otp, created_at FROM otps
            WHERE identifier = $1
            ORDER BY created_at DESC, otp_id DESC
            LIMIT 1
        """

        try:
            async with self.db.acquire() as conn:
                row = await conn.fetchrow(query, identifier)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, asyncio.TimeoutError, OSError) as e:
            raise StorageException("Failed to retrieve OTP", details=str(e)) from e

        return OTPRecord(**dict(row)) if row else None


class InMemoryOTPRepository:
    """Process-local OTP store, for development and tests"""

    def __init__(self):
        self._records: List[OTPRecord] = []

    async def insert(self, identifier: str, otp: str, created_at: int) -> OTPRecord:
        record = OTPRecord(identifier=identifier, otp=otp, created_at=created_at)
        self._records.append(record)
        return record

    async def get_latest(self, identifier: str) -> Optional[OTPRecord]:
        latest = None
        for record in self._records:
            # >= so the later insert wins a timestamp tie
            if record.identifier == identifier and (latest is None or record.created_at >= latest.created_at):
                latest = record
        return latest

    def records(self, identifier: Optional[str] = None) -> List[OTPRecord]:
        """Stored records in insertion order, optionally for one identifier"""
        if identifier is None:
            return list(self._records)
        return [r for r in self._records if r.identifier == identifier]
