# thelook/config.py

"""
Configuration for The Look API.
Loads environment variables (and an optional .env file) into typed settings.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-later"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Store
    database_url: str = "sqlite:///./the-look.db"
    seed_catalog: bool = True

    # Tokens
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Stripe
    stripe_secret_key: str = ""
    payment_currency: str = "usd"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_dir: str = "logs"


@lru_cache
def get_settings() -> Settings:
    return Settings()
