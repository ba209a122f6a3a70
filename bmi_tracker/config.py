"""
Application configuration
"""
import os
from typing import Optional


class Settings:
    """Application settings"""

    # Store credentials, composed into a MySQL URL unless DATABASE_URL is set
    DB_USER: str = os.getenv("DB_USER", "")
    DB_PASS: str = os.getenv("DB_PASS", "")
    DB_HOST: str = os.getenv("DB_HOST", "")
    DB_NAME: str = os.getenv("DB_NAME", "")
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL", "")

    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_AUTO_CREATE: bool = os.getenv("DB_AUTO_CREATE", "").strip().lower() in {"1", "true", "yes"}

    PORT: int = int(os.getenv("PORT") or "8080")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # CORS settings
    CORS_ORIGINS: list = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list = ["GET", "POST", "DELETE", "OPTIONS"]
    CORS_ALLOW_HEADERS: list = ["Content-Type"]


settings = Settings()
