"""
Exceptions Module
Custom exceptions and handlers
"""

from otpgate.exceptions.custom_exceptions import (
    # Base
    OTPGateException,

    # Request
    MalformedRequestException,
    UnknownOperationException,

    # Storage
    StorageException,

    # Delivery
    InvalidChannelException,
    DispatchException,

    # OTP
    OTPException,
    OTPNotFoundException,
    OTPExpiredException,
    OTPInvalidException,
)

from otpgate.exceptions.handlers import (
    otpgate_exception_handler,
    validation_exception_handler,
    not_found_exception_handler,
    generic_exception_handler
)

__all__ = [
    # Base
    "OTPGateException",

    # Request
    "MalformedRequestException",
    "UnknownOperationException",

    # Storage
    "StorageException",

    # Delivery
    "InvalidChannelException",
    "DispatchException",

    # OTP
    "OTPException",
    "OTPNotFoundException",
    "OTPExpiredException",
    "OTPInvalidException",

    # Handlers
    "otpgate_exception_handler",
    "validation_exception_handler",
    "not_found_exception_handler",
    "generic_exception_handler"
]
