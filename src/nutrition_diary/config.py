"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    api_base_url: str
    request_timeout_seconds: float = 15.0
    retry_attempts: int = 2
    retry_delay_seconds: float = 0.3
    page_size: int = 5
    load_more_delay_seconds: float = 0.3
    discard_stale_responses: bool = False
    max_sessions: int = 1000
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
