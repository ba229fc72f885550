"""
Application configuration using environment variables.
"""
import os
import secrets
from functools import lru_cache
from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "SocialDash API"
    debug: bool = False
    environment: str = "development"

    # Security
    secret_key: str = os.getenv("SECRET_KEY", secrets.token_urlsafe(32))
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60  # 1 hour
    refresh_token_expire_days: int = 7

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./socialdash.db")

    # CORS
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://localhost:8080",
        "http://localhost:3000",
    ]

    # Rate limiting
    login_rate_limit: str = "5/minute"
    register_rate_limit: str = "3/minute"

    # Partitions
    default_owner: str = "default"
    seed_demo_data: bool = True

    # Post lifecycle
    clear_schedule_on_unschedule: bool = True
    display_timezone: str = "UTC"

    # Analytics
    analytics_source: str = "generated"  # generated or static
    analytics_seed: int = 42

    @field_validator("display_timezone")
    @classmethod
    def check_display_timezone(cls, value: str) -> str:
        """Fail at startup on an unknown IANA zone name."""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ValueError(f"Unknown display timezone '{value}'") from e
        return value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Validate secret key on startup
settings = get_settings()
if settings.environment == "production" and not os.getenv("SECRET_KEY"):
    raise ValueError(
        "SECRET_KEY must be set in production! "
        "Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\""
    )
