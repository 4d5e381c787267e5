"""
Utilities Module
Helper functions and utilities
"""

from otpgate.utils.otp_generator import OTPGenerator
from otpgate.utils.clock import Clock
from otpgate.utils.logger import setup_logger

__all__ = [
    'OTPGenerator',
    'Clock',
    'setup_logger'
]
