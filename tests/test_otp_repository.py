import asyncio
from contextlib import asynccontextmanager

import pytest

from otpgate.db.repositories.otp_repository import InMemoryOTPRepository, PostgresOTPRepository
from otpgate.exceptions.custom_exceptions import StorageException
from otpgate.models.otp import OTPRecord


class FakeConnection:
    def __init__(self, row=None, error=None):
        self.row = row
        self.error = error
        self.calls = []

    async def fetchrow(self, query, *args):
        self.calls.append((query, args))
        if self.error:
            raise self.error
        return self.row


class FakePool:
    def __init__(self, conn):
        self.conn = conn

    @asynccontextmanager
    async def acquire(self):
        yield self.conn


# ============================================================================
# IN-MEMORY
# ============================================================================

async def test_get_latest_returns_none_for_unknown_identifier():
    repo = InMemoryOTPRepository()
    assert await repo.get_latest("+15551234567") is None


async def test_get_latest_returns_newest_record():
    repo = InMemoryOTPRepository()
    await repo.insert("a@example.com", "111111", 100)
    await repo.insert("a@example.com", "222222", 200)
    await repo.insert("b@example.com", "333333", 300)

    latest = await repo.get_latest("a@example.com")
    assert latest == OTPRecord(identifier="a@example.com", otp="222222", created_at=200)


async def test_get_latest_prefers_created_at_over_insert_order():
    repo = InMemoryOTPRepository()
    await repo.insert("a@example.com", "222222", 200)
    await repo.insert("a@example.com", "111111", 100)

    latest = await repo.get_latest("a@example.com")
    assert latest.otp == "222222"


async def test_timestamp_tie_goes_to_last_insert():
    repo = InMemoryOTPRepository()
    await repo.insert("a@example.com", "111111", 100)
    await repo.insert("a@example.com", "222222", 100)

    latest = await repo.get_latest("a@example.com")
    assert latest.otp == "222222"


async def test_records_are_never_replaced():
    repo = InMemoryOTPRepository()
    await repo.insert("a@example.com", "111111", 100)
    await repo.insert("a@example.com", "222222", 200)

    assert [r.otp for r in repo.records("a@example.com")] == ["111111", "222222"]


# ============================================================================
# POSTGRES
# ============================================================================

async def test_postgres_insert_returns_record():
    conn = FakeConnection(row={"identifier": "+15551234567", "otp": "000007", "created_at": 100})
    repo = PostgresOTPRepository(FakePool(conn))

    record = await repo.insert("+15551234567", "000007", 100)

    assert record.otp == "000007"
    assert conn.calls[0][1] == ("+15551234567", "000007", 100)


async def test_postgres_get_latest_missing_row():
    repo = PostgresOTPRepository(FakePool(FakeConnection(row=None)))
    assert await repo.get_latest("+15551234567") is None


async def test_postgres_get_latest_orders_newest_first():
    conn = FakeConnection(row={"identifier": "x", "otp": "123456", "created_at": 5})
    repo = PostgresOTPRepository(FakePool(conn))

    await repo.get_latest("x")

    query = conn.calls[0][0]
    assert "ORDER BY created_at DESC" in query
    assert "LIMIT 1" in query


async def test_postgres_write_failure_raises_storage_exception():
    repo = PostgresOTPRepository(FakePool(FakeConnection(error=OSError("connection refused"))))

    with pytest.raises(StorageException) as exc_info:
        await repo.insert("x", "123456", 1)
    assert exc_info.value.message == "Failed to store OTP"


async def test_postgres_read_failure_raises_storage_exception():
    repo = PostgresOTPRepository(FakePool(FakeConnection(error=OSError("connection refused"))))

    with pytest.raises(StorageException) as exc_info:
        await repo.get_latest("x")
    assert exc_info.value.message == "Failed to retrieve OTP"


@pytest.mark.parametrize("operation, message", [
    (lambda repo: repo.insert("x", "123456", 1), "Failed to store OTP"),
    (lambda repo: repo.get_latest("x"), "Failed to retrieve OTP"),
])
async def test_postgres_timeout_raises_storage_exception(operation, message):
    repo = PostgresOTPRepository(FakePool(FakeConnection(error=asyncio.TimeoutError())))

    with pytest.raises(StorageException) as exc_info:
        await operation(repo)
    assert exc_info.value.message == message
    assert exc_info.value.status_code == 500


# ============================================================================
# BACKEND SELECTION
# ============================================================================

def test_memory_backend_is_shared_between_requests(monkeypatch):
    from otpgate.core import dependencies
    from otpgate.core.config import settings

    monkeypatch.setattr(settings, "OTP_STORE_BACKEND", "memory")
    monkeypatch.setattr(dependencies, "_memory_repo", None)

    first = dependencies.get_otp_repository()
    assert isinstance(first, InMemoryOTPRepository)
    assert dependencies.get_otp_repository() is first


def test_postgres_backend_requires_initialized_pool(monkeypatch):
    from otpgate.core import dependencies
    from otpgate.core.config import settings

    monkeypatch.setattr(settings, "OTP_STORE_BACKEND", "postgres")

    with pytest.raises(RuntimeError):
        dependencies.get_otp_repository()
