# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cronkit.core.constants import DEFAULT_SEARCH_HORIZON_DAYS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CRONKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Occurrence calculator
    default_count: int = 5
    max_count: int = 20
    search_horizon_days: int = DEFAULT_SEARCH_HORIZON_DAYS

    @field_validator("default_count", "max_count", "search_horizon_days")
    @classmethod
    def _require_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"


def get_settings() -> Settings:
    return Settings()
