"""
Configuration and settings for the hub backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.constants import SAMPLE_INTERVAL_SECONDS

DEV_SECRET_KEY = "osrs-gaming-hub-dev-secret-change-in-production"


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")
    log_level: str = Field(default="INFO")

    # Relational storage; absent means the in-memory backend (demo mode).
    database_url: Optional[str] = Field(default=None)

    # Access tokens. 30 days matches the lifetime of the old session cookie.
    secret_key: str = Field(default=DEV_SECRET_KEY)
    access_token_expire_minutes: int = Field(default=30 * 24 * 60)

    # LLM / Gemini
    gemini_api_key: Optional[str] = Field(default=None)
    gemini_model: str = Field(default="gemini-3-flash-preview")

    # System monitor
    stats_sampler_enabled: bool = Field(default=True)
    stats_sample_interval_seconds: float = Field(
        default=SAMPLE_INTERVAL_SECONDS, gt=0
    )

    @field_validator("database_url")
    @classmethod
    def _strip_quotes(cls, value: Optional[str]) -> Optional[str]:
        # Hosting dashboards sometimes paste the URL with surrounding quotes.
        if value is None:
            return None
        value = value.strip().strip("'\"")
        return value or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
