"""
FastAPI Dependencies
Store, delivery gateways, random source and clock for the OTP service
"""

from fastapi import Depends
from typing import Optional
import logging

from otpgate.core.config import settings
from otpgate.core.database import get_db_pool
from otpgate.db.repositories.otp_repository import (
    OTPRepository,
    PostgresOTPRepository,
    InMemoryOTPRepository
)
from otpgate.services.gateways.sms import SNSSmsGateway
from otpgate.services.gateways.email import SMTPEmailGateway
from otpgate.services.notification_service import NotificationService
from otpgate.services.otp_service import OTPService
from otpgate.utils.clock import Clock
from otpgate.utils.otp_generator import OTPGenerator

logger = logging.getLogger(__name__)

_memory_repo: Optional[InMemoryOTPRepository] = None
_sms_gateway: Optional[SNSSmsGateway] = None
_email_gateway: Optional[SMTPEmailGateway] = None


# ============================================================================
# STORE
# ============================================================================

def get_otp_repository() -> OTPRepository:
    """
    OTP store selected by OTP_STORE_BACKEND

    Usage in endpoint:
        async def endpoint(repo = Depends(get_otp_repository)):
            ...
    """
    global _memory_repo

    if settings.uses_postgres:
        return PostgresOTPRepository(get_db_pool())

    if _memory_repo is None:
        logger.warning("Using in-memory OTP store; records are lost on restart")
        _memory_repo = InMemoryOTPRepository()
    return _memory_repo


# ============================================================================
# DELIVERY
# ============================================================================

def get_sms_gateway() -> SNSSmsGateway:
    global _sms_gateway
    if _sms_gateway is None:
        _sms_gateway = SNSSmsGateway()
    return _sms_gateway


def get_email_gateway() -> SMTPEmailGateway:
    global _email_gateway
    if _email_gateway is None:
        _email_gateway = SMTPEmailGateway()
    return _email_gateway


def get_notification_service(
    sms_gateway=Depends(get_sms_gateway),
    email_gateway=Depends(get_email_gateway)
) -> NotificationService:
    return NotificationService(sms_gateway, email_gateway)


# ============================================================================
# RANDOMNESS AND TIME
# ============================================================================

def get_otp_generator() -> OTPGenerator:
    return OTPGenerator()


def get_clock() -> Clock:
    return Clock()


# ============================================================================
# OTP SERVICE
# ============================================================================

def get_otp_service(
    otp_repo: OTPRepository = Depends(get_otp_repository),
    notification_service: NotificationService = Depends(get_notification_service),
    generator: OTPGenerator = Depends(get_otp_generator),
    clock: Clock = Depends(get_clock)
) -> OTPService:
    """Build the OTP service from injected collaborators"""
    return OTPService(
        otp_repo=otp_repo,
        notification_service=notification_service,
        generator=generator,
        clock=clock
    )
