"""
Services Module
Business logic layer
"""

from otpgate.services.otp_service import OTPService
from otpgate.services.notification_service import NotificationService

__all__ = [
    "OTPService",
    "NotificationService"
]
