"""
OTP Service
Business logic for issuing and verifying one-time passcodes
"""

import logging

from otpgate.core.config import settings
from otpgate.db.repositories.otp_repository import OTPRepository
from otpgate.models.otp import DeliveryChannel
from otpgate.services.notification_service import NotificationService
from otpgate.utils.clock import Clock
from otpgate.utils.otp_generator import OTPGenerator
from otpgate.exceptions.custom_exceptions import (
    StorageException,
    DispatchException,
    OTPNotFoundException,
    OTPExpiredException,
    OTPInvalidException
)

logger = logging.getLogger(__name__)


class OTPService:
    """OTP send and verify flows"""

    def __init__(
        self,
        otp_repo: OTPRepository,
        notification_service: NotificationService,
        generator: OTPGenerator,
        clock: Clock,
        expiry_seconds: int = None
    ):
        self.otp_repo = otp_repo
        self.notification_service = notification_service
        self.generator = generator
        self.clock = clock
        self.expiry_seconds = settings.OTP_EXPIRY_SECONDS if expiry_seconds is None else expiry_seconds

    # ========================================================================
    # SEND
    # ========================================================================

    async def send_otp(self, identifier: str, method: str) -> str:
        """
        Generate, store and deliver a new OTP

        Args:
            identifier: Phone number or email address
            method: "sms" or "email"

        Returns:
            Success message

        Raises:
            StorageException: OTP could not be stored (nothing is sent)
            InvalidChannelException: Unknown method (stored OTP is kept)
            DispatchException: Delivery failed (stored OTP is kept)
        """
        otp = self.generator.generate()

        try:
            await self.otp_repo.insert(identifier, otp, self.clock.now())
        except StorageException as e:
            raise StorageException("Failed to store OTP", details=e.details) from e

        logger.info(f"OTP stored for {identifier}")

        # Stored records are never rolled back, even when the method is rejected
        channel = DeliveryChannel.parse(method)

        try:
            await self.notification_service.send(channel, identifier, otp)
        except DispatchException as e:
            logger.error(f"OTP for {identifier} stored but not delivered via {channel.value}")
            raise DispatchException("Failed to send OTP", details=e.details) from e

        return "OTP sent successfully"

    # ========================================================================
    # VERIFY
    # ========================================================================

    async def verify_otp(self, identifier: str, otp: str) -> str:
        """
        Check an OTP against the newest one stored for the identifier

        Args:
            identifier: Phone number or email address
            otp: Code submitted by the user

        Returns:
            Success message

        Raises:
            StorageException: Lookup failed
            OTPNotFoundException: No OTP stored for identifier
            OTPExpiredException: Newest OTP older than the expiry window
            OTPInvalidException: Code does not match the newest OTP
        """
        try:
            record = await self.otp_repo.get_latest(identifier)
        except StorageException as e:
            raise StorageException("Failed to retrieve OTP", details=e.details) from e

        if record is None:
            raise OTPNotFoundException(details=f"No OTP found for identifier: {identifier}")

        age = self.clock.now() - record.created_at
        if age > self.expiry_seconds:
            raise OTPExpiredException(details=f"OTP expired for identifier: {identifier} ({age}s old)")

        if otp != record.otp:
            raise OTPInvalidException(details=f"Invalid OTP provided for identifier: {identifier}")

        logger.info(f"OTP verified for {identifier}")

        return "OTP verified successfully"
