"""Application configuration settings."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_default_data_dir() -> Path:
    """Get the default data directory, using the Fly Volume path if available."""
    if os.path.isdir("/data"):
        return Path("/data")
    return Path(".")


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    PROJECT_NAME: str = "Watermeter"
    VERSION: str = "0.1.0"
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Storage - defaults to Fly Volume path if /data exists
    DATA_DIR: Path = _get_default_data_dir()
    DATABASE_URL: str = f"sqlite:///{_get_default_data_dir() / 'watermeter.db'}"
    IMAGES_DIR: Path = _get_default_data_dir() / "images"

    # Session authentication
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    SESSION_MAX_AGE: int = 86400  # 24 hours
    APP_PASSWORD: str = "change-me"
    APP_PASSWORD_HASH: str | None = None  # bcrypt hash, overrides APP_PASSWORD


settings = Settings()
