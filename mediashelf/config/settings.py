"""
Application Settings

Centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.

Configuration Categories:
=========================
- Application: Basic app info (name, version, debug mode)
- Server: Host and port settings
- Database: Connection settings for the persistent backend
- Storage: In-memory fallback and sample data
- Media: Image URL resolution
- CORS: Cross-origin resource sharing
- Limits: Result caps for search, similar/popular works and recommendations

Storage Backend Selection:
==========================
    DATABASE_URL empty        → in-memory backend (process-local, lost on restart)
    DATABASE_URL set, reachable → SQL backend (one session per request)
    DATABASE_URL set, unreachable → falls back to the in-memory backend

Usage:
======
    from mediashelf.config.settings import settings

    # Access settings
    db_url = settings.DATABASE_URL
    is_dev = settings.is_development
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # APPLICATION
    # ═══════════════════════════════════════════════════════════════════════════════

    APP_NAME: str = "Mediashelf"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ═══════════════════════════════════════════════════════════════════════════════
    # SERVER
    # ═══════════════════════════════════════════════════════════════════════════════

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # ═══════════════════════════════════════════════════════════════════════════════
    # DATABASE
    # ═══════════════════════════════════════════════════════════════════════════════

    DATABASE_URL: str = Field(
        default="",
        description="Async SQLAlchemy URL; leave empty to run on the in-memory backend",
    )
    DATABASE_POOL_SIZE: int = Field(
        default=10,
        description="Number of persistent connections in the pool",
    )
    DATABASE_MAX_OVERFLOW: int = Field(
        default=20,
        description="Extra connections allowed when pool is exhausted",
    )
    DATABASE_CREATE_TABLES: bool = Field(
        default=True,
        description="Create missing tables on startup",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # IN-MEMORY STORAGE
    # ═══════════════════════════════════════════════════════════════════════════════

    SEED_MOCK_DATA: bool = Field(
        default=True,
        description="Load the sample catalog into the in-memory backend on startup",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # MEDIA
    # ═══════════════════════════════════════════════════════════════════════════════

    IMAGE_BASE_URL: str = Field(
        default="http://localhost:3000/uploads",
        description="Base URL used to build absolute cover and profile image URLs",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # CORS
    # ═══════════════════════════════════════════════════════════════════════════════

    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # LIMITS
    # ═══════════════════════════════════════════════════════════════════════════════

    SEARCH_MAX_RESULTS: int = 50
    SIMILAR_WORKS_LIMIT: int = 10
    POPULAR_WORKS_LIMIT: int = 10
    RECOMMENDATION_BATCH_SIZE: int = 5

    # ═══════════════════════════════════════════════════════════════════════════════
    # PROPERTIES
    # ═══════════════════════════════════════════════════════════════════════════════

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


# Global settings instance for convenient import
settings = get_settings()
