"""Configuration settings for the results pipeline."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pipeline settings, read from ``F1RESULTS_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="F1RESULTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Sources
    results_base_url: str | None = None
    jolpica_base_url: str = "https://api.jolpi.ca/ergast/f1"
    request_timeout: float = 30.0
    jolpica_page_limit: int = 100
    jolpica_min_request_interval: float = 0.3  # Jolpica allows ~4 req/s

    # Normalization
    strict_session_kind: bool = False

    # Storage
    database_url: str | None = None

    # Logging
    log_dir: str = "logs"
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
