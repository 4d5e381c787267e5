"""
Shared fixtures: in-memory store, recording gateways, fixed clock and random source
"""

from typing import List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from otpgate.core.dependencies import get_otp_service
from otpgate.db.repositories.otp_repository import InMemoryOTPRepository
from otpgate.exceptions.custom_exceptions import DispatchException, StorageException
from otpgate.models.otp import OTPRecord
from otpgate.services.notification_service import NotificationService
from otpgate.services.otp_service import OTPService
from otpgate.utils.otp_generator import OTPGenerator

START_TIME = 1_700_000_000
SENDER = "otp@example.com"


class FixedClock:
    def __init__(self, now: int = START_TIME):
        self.current = now

    def now(self) -> int:
        return self.current

    def advance(self, seconds: int) -> None:
        self.current += seconds


class SequenceRandom:
    """randbelow stand-in that replays the given values"""

    def __init__(self, *values: int):
        self.values = list(values)
        self.calls: List[int] = []

    def __call__(self, n: int) -> int:
        self.calls.append(n)
        return self.values.pop(0)


class RecordingSmsGateway:
    def __init__(self):
        self.sent: List[Tuple[str, str]] = []
        self.fail = False

    async def send_sms(self, phone_number: str, message: str) -> None:
        if self.fail:
            raise DispatchException(details="sns unavailable")
        self.sent.append((phone_number, message))


class RecordingEmailGateway:
    def __init__(self):
        self.sent: List[dict] = []
        self.fail = False

    async def send_email(self, sender: str, recipient: str, subject: str, body: str) -> None:
        if self.fail:
            raise DispatchException(details="smtp unavailable")
        self.sent.append({"sender": sender, "recipient": recipient, "subject": subject, "body": body})


class FailingOTPRepository:
    def __init__(self):
        self.insert_calls = 0

    async def insert(self, identifier: str, otp: str, created_at: int) -> OTPRecord:
        self.insert_calls += 1
        raise StorageException(details="connection refused")

    async def get_latest(self, identifier: str) -> Optional[OTPRecord]:
        raise StorageException(details="connection refused")


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def random_source():
    return SequenceRandom(7, 123456, 654321, 999999)


@pytest.fixture
def generator(random_source):
    return OTPGenerator(randbelow=random_source)


@pytest.fixture
def repo():
    return InMemoryOTPRepository()


@pytest.fixture
def sms_gateway():
    return RecordingSmsGateway()


@pytest.fixture
def email_gateway():
    return RecordingEmailGateway()


@pytest.fixture
def notification_service(sms_gateway, email_gateway):
    return NotificationService(sms_gateway, email_gateway, sender_email=SENDER, email_subject="Your OTP")


@pytest.fixture
def otp_service(repo, notification_service, generator, clock):
    return OTPService(
        otp_repo=repo,
        notification_service=notification_service,
        generator=generator,
        clock=clock,
        expiry_seconds=300
    )


@pytest.fixture
def client(otp_service):
    from main import app

    app.dependency_overrides[get_otp_service] = lambda: otp_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(notification_service, generator, clock):
    """Client whose OTP store is unreachable"""
    from main import app

    service = OTPService(FailingOTPRepository(), notification_service, generator, clock)
    app.dependency_overrides[get_otp_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
