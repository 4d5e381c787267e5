"""
Custom Exception Classes
Application-specific exceptions with fixed status codes and messages
"""

from fastapi import status
from typing import Any, Optional


class OTPGateException(Exception):
    """Base exception for the OTP gateway"""

    def __init__(self, message: str, status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


# ============================================================================
# REQUEST EXCEPTIONS
# ============================================================================

class MalformedRequestException(OTPGateException):
    """Request body could not be parsed"""

    def __init__(self, message: str = "Invalid request body", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class UnknownOperationException(OTPGateException):
    """No operation is registered for the requested path"""

    def __init__(self, message: str = "Not Found", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )


# ============================================================================
# STORAGE EXCEPTIONS
# ============================================================================

class StorageException(OTPGateException):
    """OTP store unreachable or rejected the operation"""

    def __init__(self, message: str = "Storage error", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )


# ============================================================================
# DELIVERY EXCEPTIONS
# ============================================================================

class InvalidChannelException(OTPGateException):
    """Delivery method is not one of the supported channels"""

    def __init__(self, message: str = "Invalid method", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class DispatchException(OTPGateException):
    """SMS or email transport failed"""

    def __init__(self, message: str = "Failed to send OTP", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )


# ============================================================================
# OTP EXCEPTIONS
# ============================================================================

class OTPException(OTPGateException):
    """Base OTP verification exception"""
    pass


class OTPNotFoundException(OTPException):
    """No OTP stored for the identifier"""

    def __init__(self, message: str = "No OTP found", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class OTPExpiredException(OTPException):
    """Latest OTP is older than the expiry window"""

    def __init__(self, message: str = "OTP expired", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class OTPInvalidException(OTPException):
    """Submitted OTP does not match the latest one"""

    def __init__(self, message: str = "Invalid OTP", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )
