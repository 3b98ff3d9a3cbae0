"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_STT_CATALOG_PATH = Path(__file__).parent / "data" / "stt_catalog.json"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "propal_db"
    mongo_server_selection_timeout_ms: int = 5000

    # Password hashing (bcrypt cost factor)
    password_hash_rounds: int = 12

    # Password reset
    password_reset_token_ttl_minutes: int = 60
    app_base_url: str = "http://localhost:3000"

    # Speech-to-text catalog served to the agent page
    stt_catalog_path: Path = DEFAULT_STT_CATALOG_PATH

    # HTTP
    cors_origins: list[str] = [
        "http://localhost:3000",  # Development
    ]

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
