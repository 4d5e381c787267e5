"""
Exception Handlers
Global exception handling for FastAPI

Every error maps to a fixed status code whose JSON body is a static
message string. Internal details are logged, never returned.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from otpgate.exceptions.custom_exceptions import (
    OTPGateException,
    MalformedRequestException,
    UnknownOperationException,
)

logger = logging.getLogger(__name__)


def _error_response(exc: OTPGateException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.message)


async def otpgate_exception_handler(request: Request, exc: OTPGateException):
    """
    Handle all OTP gateway exceptions
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.__class__.__name__}: {exc.message} | Details: {exc.details}")
    else:
        logger.warning(f"{exc.__class__.__name__}: {exc.message} | Details: {exc.details}")

    return _error_response(exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle unparseable or incomplete request bodies
    """
    errors = [
        {
            "field": " -> ".join(str(x) for x in error["loc"]),
            "type": error["type"]
        }
        for error in exc.errors()
    ]
    logger.warning(f"Malformed request on {request.url.path}: {errors}")

    return _error_response(MalformedRequestException(details=errors))


async def not_found_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handle routing errors raised by Starlette (unknown path, wrong method)
    """
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.warning(f"Unknown operation: {request.method} {request.url.path}")
        return _error_response(UnknownOperationException())

    return JSONResponse(status_code=exc.status_code, content=str(exc.detail))


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Handle all other exceptions
    """
    logger.exception(f"Unhandled exception: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content="Internal server error"
    )
