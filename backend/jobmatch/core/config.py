"""
Application Configuration
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application Settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra='ignore'
    )

    # App Configuration
    APP_NAME: str = "JobMatch"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # Database Configuration
    DATABASE_URL: str
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10

    # Redis Configuration
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_ENABLED: bool = True
    CACHE_EXPIRE_SECONDS: int = 300

    # JWT Configuration
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Routes used for silent redirects
    HOME_ROUTE: str = "/"
    LOGIN_ROUTE: str = "/auth/login"

    # Profiles
    ANONYMOUS_NAME_PREFIX: str = "Anonymous"
    ANONYMOUS_NAME_MAX: int = 9999
    DEFAULT_FULL_NAME: str = "Anonymous User"
    PROFILE_RECENT_APPLICATIONS: int = 5

    # Auth
    MIN_PASSWORD_LENGTH: int = 6
    COMPANY_MIN_PASSWORD_LENGTH: int = 8

    # Company provisioning: undo completed steps when a later step fails
    PROVISIONING_COMPENSATE: bool = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
