"""
Application settings - pydantic-settings configuration.

This module defines decoder configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Decoder settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="DOGCEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Documents above this size are rejected before parsing
    max_document_bytes: int = 1_048_576

    # Tolerate top-level keys besides code/message/status
    allow_extra_fields: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
