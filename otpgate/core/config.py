"""
Application Configuration
Environment variables and settings
"""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # ==================== APP ====================
    APP_NAME: str = "OTPGATE"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:8080"

    # ==================== OTP STORE ====================
    # "postgres" uses the asyncpg pool, "memory" keeps records in process
    OTP_STORE_BACKEND: str = "postgres"

    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "otpgate"
    POSTGRES_MIN_POOL_SIZE: int = 2
    POSTGRES_MAX_POOL_SIZE: int = 10
    POSTGRES_SSL: Optional[str] = None

    # ==================== OTP ====================
    OTP_EXPIRY_SECONDS: int = 300
    OTP_SENDER_EMAIL: str = Field(default="notifications.otp@example.com")
    OTP_EMAIL_SUBJECT: str = "Your OTP"

    # ==================== SMS (AWS SNS) ====================
    AWS_REGION: str = "us-east-1"
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None

    # ==================== EMAIL ====================
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 587
    SMTP_USER: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_TLS: bool = False
    SMTP_START_TLS: bool = True

    # ==================== MISC ====================
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "otpgate.log"

    # ==================== HELPER PROPERTIES ====================
    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    @property
    def database_url(self) -> str:
        """Construct database URL"""
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def uses_postgres(self) -> bool:
        return self.OTP_STORE_BACKEND.lower() == "postgres"

    @property
    def is_email_configured(self) -> bool:
        """Check if SMTP credentials are set"""
        return all([self.SMTP_USER, self.SMTP_PASSWORD])

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


# Global settings instance
settings = Settings()
