"""
API Routes Module
All API route handlers
"""

from otpgate.api.routes import otp_routes

__all__ = [
    "otp_routes"
]
