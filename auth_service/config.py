"""
Configuration management for the authentication service
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Service configuration loaded from environment variables"""

    LOG_LEVEL: str = "INFO"

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./app.db"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10

    # Token Configuration
    # Empty secret means tokens can not be issued (SigningError).
    TOKEN_SECRET: str = ""
    # Seconds a token stays valid after it was issued
    TOKEN_EXPIRED_TIME: int = 600

    # AES key, must be 16, 24 or 32 bytes once UTF-8 encoded
    CRYPTO_KEY: str = ""

    # Cache Configuration (empty URL disables the cache)
    REDIS_URL: str = ""
    REDIS_POOL_SIZE: int = 10

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
