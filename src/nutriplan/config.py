"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    timezone: str = "UTC"
    default_water_goal: int = 8
    default_meals_per_day: int = 5
    reference_weekday: int = 1
    read_retry_attempts: int = 1
    read_retry_delay_seconds: float = 0.3
    event_webhook_url: str | None = None
    event_workers: int = 2
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
