"""
OTP Request Schemas
Pydantic models for OTP endpoints
"""

from pydantic import BaseModel, Field


class SendOTPRequest(BaseModel):
    """Request schema for issuing an OTP"""

    identifier: str = Field(..., description="Phone number (sms) or email address (email)")
    method: str = Field(..., description="Delivery method: sms or email")

    class Config:
        json_schema_extra = {
            "example": {
                "identifier": "+15551234567",
                "method": "sms"
            }
        }


class VerifyOTPRequest(BaseModel):
    """Request schema for OTP verification"""

    identifier: str = Field(..., description="Identifier the OTP was sent to")
    otp: str = Field(..., description="OTP received by the user")

    class Config:
        json_schema_extra = {
            "example": {
                "identifier": "+15551234567",
                "otp": "042817"
            }
        }
