"""
Configuration settings for the coursegate library.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Progression Gating
    # ========================================
    proficiency_threshold: float = Field(
        default=80.0,
        ge=0,
        le=100,
        description="Minimum assessment score (0-100) that unlocks the next activity",
    )
    locking_enabled: bool = Field(
        default=True,
        description="Enforce sequential locking; when false every activity is open",
    )

    # ========================================
    # Question Selection
    # ========================================
    rotation_mode: Literal["deterministic", "random"] = Field(
        default="deterministic",
        description="deterministic: honour seed/attempt params; random: always use the unseeded shuffle",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="INFO",
        description="Logging level for the CLI sink (DEBUG, INFO, WARNING, ERROR)",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
