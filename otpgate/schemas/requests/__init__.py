"""
Request Schemas Module
All API request schemas
"""

from otpgate.schemas.requests.otp_requests import (
    SendOTPRequest,
    VerifyOTPRequest
)

__all__ = [
    "SendOTPRequest",
    "VerifyOTPRequest"
]
