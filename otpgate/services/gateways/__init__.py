"""
Gateways Module
Transports for OTP delivery
"""

from otpgate.services.gateways.sms import SNSSmsGateway
from otpgate.services.gateways.email import SMTPEmailGateway

__all__ = [
    "SNSSmsGateway",
    "SMTPEmailGateway"
]
