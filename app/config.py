# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   print(get_settings().MONGO_URI)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Both the API service and the seed script (scripts/seed_planets.py) read
# their configuration from here.
# =============================================================================

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (one level above the app/ package)
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development
    """

    # -------------------------------------------------------------------------
    # MongoDB Configuration
    # -------------------------------------------------------------------------

    MONGO_URI: str = Field(
        default="mongodb://localhost:27017/solarSystem",
        description="MongoDB connection URI"
    )

    MONGO_USERNAME: str | None = Field(
        default=None,
        description="Username the service authenticates with"
    )

    MONGO_PASSWORD: str | None = Field(
        default=None,
        description="Password the service authenticates with"
    )

    MONGO_DB_NAME: str = Field(
        default="solarSystem",
        description="Database holding the planets collection"
    )

    MONGO_COLLECTION: str = Field(
        default="planets",
        description="Collection holding the planet records"
    )

    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = Field(
        default=30000,
        ge=1,
        description="How long the driver waits for a reachable server"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: str = Field(
        default="development",
        description="Environment / deployment-mode label reported by GET /os"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    APP_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    APP_PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Static Files
    # -------------------------------------------------------------------------

    STATIC_DIR: Path = Field(
        default=PROJECT_ROOT / "static",
        description="Directory served at the site root (index.html, images)"
    )

    OPENAPI_FILE: Path = Field(
        default=PROJECT_ROOT / "static" / "oas.json",
        description="OpenAPI description returned by GET /api-docs"
    )

    # -------------------------------------------------------------------------
    # Seed Script
    # -------------------------------------------------------------------------
    # Used only by scripts/seed_planets.py

    SEED_DB_NAME: str | None = Field(
        default=None,
        description="Database the seed script provisions (defaults to MONGO_DB_NAME)"
    )

    SEED_USERNAME: str = Field(
        default="admin",
        description="Application user created by the seed script"
    )

    SEED_PASSWORD: str = Field(
        default="password",
        description="Password for the application user"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def index_file(self) -> Path:
        """Root HTML page served by GET /."""
        return self.STATIC_DIR / "index.html"

    @property
    def seed_db_name(self) -> str:
        """Database the seed script provisions; the service database unless overridden."""
        return self.SEED_DB_NAME or self.MONGO_DB_NAME


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()
