from enum import Enum

from pydantic import BaseModel

from otpgate.exceptions.custom_exceptions import InvalidChannelException


class DeliveryChannel(str, Enum):
    """Channels an OTP can be delivered over"""

    SMS = "sms"
    EMAIL = "email"

    @classmethod
    def parse(cls, value: str) -> "DeliveryChannel":
        """
        Convert a request's method string into a channel

        Raises:
            InvalidChannelException: value is not exactly "sms" or "email"
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidChannelException(details=f"Unsupported method: {value!r}")


class OTPRecord(BaseModel):
    identifier: str
    otp: str
    created_at: int  # unix epoch seconds

    class Config:
        from_attributes = True
        frozen = True
