"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    debug: bool = False
    default_data_source: str | None = None

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_data_source(raw: str | None) -> str | None:
    """Normalise a data source label, treating blanks as absent."""
    if raw is None:
        return None
    cleaned = raw.strip()
    return cleaned or None
