"""
Configuration module using pydantic-settings.

Loads settings from environment variables with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CARTOLA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Configuration
    api_title: str = "Cartola Analytics API"
    api_version: str = "0.1.0"
    api_description: str = "Season analytics for Cartola FC fantasy teams"
    debug: bool = False

    # Cartola API
    cartola_base_url: str = "https://api.cartola.globo.com"
    cartola_timeout: float = 30.0

    # Cache Settings
    clubs_cache_ttl: int = 3600  # 1 hour in seconds

    # Data sources
    data_file: Path | None = None
    club_source: Literal["snapshot", "cartola"] = "snapshot"

    # Engine
    season_rounds: int = 38
    moving_average_window: int = 3
    scout_table: Literal["canonical", "legacy"] = "canonical"
    scout_weights: dict[str, float] | None = None  # overrides scout_table
    scout_epsilon: float = 1e-9

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
