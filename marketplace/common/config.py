"""
Configuration management for the marketplace services
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Marketplace configuration loaded from environment variables"""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./marketplace.db"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10

    # Token Configuration
    JWT_SECRET: str = "change-this-secret-in-prod"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_HOURS: int = 24

    # Password hashing work factor (pbkdf2_sha256 rounds)
    PASSWORD_HASH_ROUNDS: int = 29000

    # Service locations
    AUTH_SERVICE_URL: str = "http://localhost:3001"
    VENDOR_SERVICE_URL: str = "http://localhost:3002"
    VENDOR_PORTAL_URL: str = "http://localhost:3003"

    # Outbound HTTP timeouts
    GATEWAY_TIMEOUT_SECONDS: float = 10.0
    CLIENT_TIMEOUT_SECONDS: float = 10.0

    # CORS Configuration (storefront, vendor portal)
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:3003"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
