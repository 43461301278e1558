"""
Configuration settings for problem_guard.

Uses Pydantic Settings to load environment variables for logging, reporting,
and sample generation defaults.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Reporting
    report_max_rejections: int = Field(20, alias="REPORT_MAX_REJECTIONS")

    # Sample generation defaults
    sample_records: int = Field(1_000, alias="SAMPLE_RECORDS")
    sample_corruption_rate: float = Field(0.1, alias="SAMPLE_CORRUPTION_RATE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
