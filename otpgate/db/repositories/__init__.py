"""
Repositories Module
Storage access layer
"""

from otpgate.db.repositories.otp_repository import (
    OTPRepository,
    PostgresOTPRepository,
    InMemoryOTPRepository
)

__all__ = [
    "OTPRepository",
    "PostgresOTPRepository",
    "InMemoryOTPRepository"
]
