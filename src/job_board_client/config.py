"""Client configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_API_URL = "http://localhost:5068/api"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    api_url: str = DEFAULT_API_URL
    session_file: Path = Path.home() / ".job_board" / "session.json"
    request_timeout_seconds: float = 30.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def normalize_base_url(raw: str) -> str:
    """Strip whitespace and trailing slashes from a base URL."""
    cleaned = raw.strip()
    if not cleaned:
        return DEFAULT_API_URL
    return cleaned.rstrip("/")
