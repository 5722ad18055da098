"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from backend.configs.base import BaseSettings
from backend.configs.database import DatabaseSettings
from backend.configs.observability import ObservabilitySettings
from backend.configs.storage import ImageStorageSettings
from backend.configs.summary import SummarySettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    image_storage: ImageStorageSettings = Field(default_factory=ImageStorageSettings)
    summary: SummarySettings = Field(default_factory=SummarySettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once; call get_settings.cache_clear()
    to reload them.

    Returns:
        Settings: Application settings instance

    Usage:
        from backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()
