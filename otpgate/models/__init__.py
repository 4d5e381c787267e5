"""
Models Module
Pydantic models for stored data
"""

from otpgate.models.otp import DeliveryChannel, OTPRecord

__all__ = [
    "DeliveryChannel",
    "OTPRecord"
]
