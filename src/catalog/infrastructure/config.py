"""Application configuration — environment-driven settings via pydantic-settings.

Every setting can be overridden with a ``CATALOG_``-prefixed environment
variable or a ``.env`` file.  ``get_settings()`` is cached: one instance
per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_", env_file=".env", case_sensitive=False
    )

    # Storage
    data_dir: Path = Path("data")

    # Observability
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
