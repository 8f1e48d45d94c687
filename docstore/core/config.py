"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Service-account JSON; Application Default Credentials are used when unset.
    FIREBASE_CREDENTIALS_PATH: Path | None = Field(default=None)
    FIREBASE_PROJECT_ID: str | None = Field(default=None)
    FIREBASE_APP_NAME: str = Field(default="[DEFAULT]")

    DOCSTORE_LOG_LEVEL: str = Field(default="info")
    DOCSTORE_LOG_DIR: Path | None = Field(default=None)
    DOCSTORE_LOG_TO_FILE: bool = Field(default=False)
    DOCSTORE_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")


settings = Settings()


__all__ = ["Settings", "settings"]
