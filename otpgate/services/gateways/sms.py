"""
SMS Gateway
Deliver text messages through AWS SNS
"""

import asyncio
import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from otpgate.core.config import settings
from otpgate.exceptions.custom_exceptions import DispatchException

logger = logging.getLogger(__name__)


class SNSSmsGateway:
    """Publishes SMS messages directly to phone numbers via SNS"""

    def __init__(self, client=None, region_name: Optional[str] = None):
        self._client = client
        self.region_name = region_name or settings.AWS_REGION

    @property
    def client(self):
        """SNS client, created on first send"""
        if self._client is None:
            self._client = boto3.client(
                "sns",
                region_name=self.region_name,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID or None,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY or None,
            )
        return self._client

    async def send_sms(self, phone_number: str, message: str) -> None:
        """
        Send an SMS

        Raises:
            DispatchException: SNS rejected the publish or was unreachable
        """
        loop = asyncio.get_running_loop()
        try:
            client = self.client
            # boto3 is blocking
            response = await loop.run_in_executor(
                None,
                lambda: client.publish(PhoneNumber=phone_number, Message=message)
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"SNS publish to {phone_number} failed: {e}")
            raise DispatchException(details=str(e)) from e

        logger.info(f"SMS sent to {phone_number} (message id {response.get('MessageId')})")
