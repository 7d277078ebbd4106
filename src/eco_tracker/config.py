"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from eco_tracker.domain.emission_factors import DEFAULT_ELECTRICITY_FACTOR

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    activities_table: str = "activities"
    default_electricity_factor: float = DEFAULT_ELECTRICITY_FACTOR
    list_limit: int = 100
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
