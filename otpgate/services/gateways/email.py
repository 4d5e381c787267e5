"""
Email Gateway
Deliver plain-text email over SMTP
"""

import logging
from email.mime.text import MIMEText

import aiosmtplib

from otpgate.core.config import settings
from otpgate.exceptions.custom_exceptions import DispatchException

logger = logging.getLogger(__name__)


class SMTPEmailGateway:
    """SMTP client built from settings"""

    def __init__(
        self,
        hostname: str = None,
        port: int = None,
        username: str = None,
        password: str = None,
        use_tls: bool = None,
        start_tls: bool = None
    ):
        self.hostname = hostname or settings.SMTP_HOST
        self.port = port or settings.SMTP_PORT
        self.username = username or settings.SMTP_USER or None
        self.password = password or settings.SMTP_PASSWORD or None
        self.use_tls = settings.SMTP_TLS if use_tls is None else use_tls
        self.start_tls = settings.SMTP_START_TLS if start_tls is None else start_tls

    async def send_email(self, sender: str, recipient: str, subject: str, body: str) -> None:
        """
        Send a plain-text email

        Raises:
            DispatchException: SMTP server refused the message or was unreachable
        """
        message = MIMEText(body, "plain", "utf-8")
        message["From"] = sender
        message["To"] = recipient
        message["Subject"] = subject

        try:
            await aiosmtplib.send(
                message,
                hostname=self.hostname,
                port=self.port,
                username=self.username,
                password=self.password,
                use_tls=self.use_tls,
                start_tls=self.start_tls if not self.use_tls else False
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {recipient}: {e}")
            raise DispatchException(details=str(e)) from e

        logger.info(f"Email sent to {recipient}")
