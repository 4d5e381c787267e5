"""
OTP Routes
Endpoints for sending and verifying one-time passcodes

Every response body is a single JSON string carrying a static message.
"""

from fastapi import APIRouter, Depends, status

from otpgate.schemas.requests.otp_requests import SendOTPRequest, VerifyOTPRequest
from otpgate.services.otp_service import OTPService
from otpgate.core.dependencies import get_otp_service

router = APIRouter(tags=["OTP"])


@router.post(
    "/send-otp",
    response_model=str,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"description": "Invalid request body | Invalid method"},
        500: {"description": "Failed to store OTP | Failed to send OTP"}
    },
    summary="Send an OTP",
    description="Generate an OTP, store it and deliver it by SMS or email"
)
async def send_otp(
    request: SendOTPRequest,
    otp_service: OTPService = Depends(get_otp_service)
):
    """
    **Send OTP**

    - `method` must be `sms` or `email`
    - Generates a 6-digit OTP valid for 5 minutes
    - The OTP is stored before delivery; it stays stored if the method is
      rejected or delivery fails
    """
    return await otp_service.send_otp(
        identifier=request.identifier,
        method=request.method
    )


@router.post(
    "/verify-otp",
    response_model=str,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"description": "Invalid request body | No OTP found | OTP expired | Invalid OTP"},
        500: {"description": "Failed to retrieve OTP"}
    },
    summary="Verify an OTP",
    description="Check an OTP against the most recent one issued for the identifier"
)
async def verify_otp(
    request: VerifyOTPRequest,
    otp_service: OTPService = Depends(get_otp_service)
):
    """
    **Verify OTP**

    - Only the newest OTP for the identifier is considered
    - OTPs older than 300 seconds are rejected
    """
    return await otp_service.verify_otp(
        identifier=request.identifier,
        otp=request.otp
    )
