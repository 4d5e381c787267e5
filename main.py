"""
Main FastAPI Application
Entry point for the OTPGATE one-time passcode service
"""
import uvicorn

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

import logging
from datetime import datetime

from otpgate.core.config import settings
from otpgate.core.database import init_db, close_db
from otpgate.exceptions.handlers import (
    otpgate_exception_handler,
    validation_exception_handler,
    not_found_exception_handler,
    generic_exception_handler
)
from otpgate.exceptions.custom_exceptions import OTPGateException
from otpgate.utils.logger import setup_logger

# Routers
from otpgate.api.routes import otp_routes

# Configure logging
setup_logger(name="otpgate", log_file=settings.LOG_FILE, level=settings.LOG_LEVEL)

logger = logging.getLogger("otpgate.main")


# ============================================================================
# LIFESPAN EVENTS
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for startup and shutdown."""

    # STARTUP
    logger.info("=" * 80)
    logger.info(" STARTING OTPGATE")
    logger.info("=" * 80)

    try:
        if settings.uses_postgres:
            logger.info(" Initializing database connection pool...")
            await init_db()
            logger.info(" Database connection established")
        else:
            logger.info(f" OTP store backend: {settings.OTP_STORE_BACKEND}")

        if not settings.is_email_configured:
            logger.warning(" SMTP credentials not set; sending unauthenticated email")

        logger.info(" OTPGATE IS READY TO SERVE!")
        logger.info("=" * 80)

    except Exception as e:
        logger.error(f" CRITICAL STARTUP FAILURE: {e}", exc_info=True)
        raise

    yield

    # SHUTDOWN
    logger.info(" SHUTTING DOWN OTPGATE")
    try:
        await close_db()
    except Exception as e:
        logger.error(f"Error closing database: {e}")
    logger.info(" OTPGATE SHUTDOWN COMPLETE")


# ============================================================================
# CREATE APP
# ============================================================================

app = FastAPI(
    title="OTPGATE",
    description="Issue and verify one-time passcodes over SMS or email",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# ============================================================================
# MIDDLEWARE
# ============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests."""
    logger.info(f"  {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"  {response.status_code}")
    return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================

app.add_exception_handler(OTPGateException, otpgate_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, not_found_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


# ============================================================================
# ROUTERS
# ============================================================================

app.include_router(otp_routes.router)


@app.get("/health", tags=["Root"], summary="Health Check")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": settings.APP_VERSION,
        "store": settings.OTP_STORE_BACKEND,
    }


# ============================================================================
# RUN APP
# ============================================================================

if __name__ == "__main__":

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
