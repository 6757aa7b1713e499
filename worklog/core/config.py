"""
Configuration settings for the application.
"""
import logging
import os
from pydantic_settings import BaseSettings
from typing import List

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with default values.
    Values can be overridden by environment variables.
    """
    # API settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Worklog API"

    # Token settings
    SECRET_KEY: str = os.environ.get("SECRET_KEY", "your-secret-key-change-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # CORS settings
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:4200", "http://localhost:3000"]

    # Document store settings ("mongodb" or "memory")
    DOCUMENT_STORE: str = "mongodb"
    MONGODB_URL: str = os.environ.get("MONGODB_URL", "mongodb://localhost:27017")
    MONGODB_DB: str = os.environ.get("MONGODB_DB", "worklog")

    # Write rate limiting (0 disables)
    WRITE_RATE_LIMIT_MAX: int = 20
    WRITE_RATE_LIMIT_WINDOW_SECONDS: int = 60

    # Logging settings
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Create settings instance
settings = Settings()


def print_config_info():
    """Log configuration information at startup."""
    logger.info(f"API Version: {settings.API_V1_STR}")
    logger.info(f"Project Name: {settings.PROJECT_NAME}")
    logger.info(f"Document Store: {settings.DOCUMENT_STORE}")
    if settings.DOCUMENT_STORE == "mongodb":
        logger.info(f"MongoDB URL: {settings.MONGODB_URL}")
        logger.info(f"MongoDB Database: {settings.MONGODB_DB}")
    logger.info(f"CORS Origins: {settings.BACKEND_CORS_ORIGINS}")
    logger.info(
        f"Write rate limit: {settings.WRITE_RATE_LIMIT_MAX} per "
        f"{settings.WRITE_RATE_LIMIT_WINDOW_SECONDS}s"
    )
    logger.info(f"Log Level: {settings.LOG_LEVEL}")
