"""
Notification Service
Deliver OTPs over SMS or email
"""

import logging
from typing import Protocol

from otpgate.core.config import settings
from otpgate.models.otp import DeliveryChannel

logger = logging.getLogger(__name__)


class SmsGateway(Protocol):
    async def send_sms(self, phone_number: str, message: str) -> None:
        ...


class EmailGateway(Protocol):
    async def send_email(self, sender: str, recipient: str, subject: str, body: str) -> None:
        ...


def format_otp_message(otp: str) -> str:
    return f"Your OTP is: {otp}"


class NotificationService:
    """Channel dispatcher over SMS and email gateways"""

    def __init__(
        self,
        sms_gateway: SmsGateway,
        email_gateway: EmailGateway,
        sender_email: str = None,
        email_subject: str = None
    ):
        self.sms_gateway = sms_gateway
        self.email_gateway = email_gateway
        self.sender_email = sender_email or settings.OTP_SENDER_EMAIL
        self.email_subject = email_subject or settings.OTP_EMAIL_SUBJECT

    async def send(self, channel: DeliveryChannel, identifier: str, otp: str) -> None:
        """
        Send an OTP to an identifier over the given channel

        Args:
            channel: SMS treats identifier as a phone number, EMAIL as an address
            identifier: Destination
            otp: Code to deliver

        Raises:
            DispatchException: Transport failure
        """
        message = format_otp_message(otp)

        if channel is DeliveryChannel.SMS:
            await self.sms_gateway.send_sms(phone_number=identifier, message=message)
        elif channel is DeliveryChannel.EMAIL:
            await self.email_gateway.send_email(
                sender=self.sender_email,
                recipient=identifier,
                subject=self.email_subject,
                body=message
            )
        else:
            raise ValueError(f"Unhandled delivery channel: {channel!r}")

        logger.info(f"OTP dispatched to {identifier} via {channel.value}")
