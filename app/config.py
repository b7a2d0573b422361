# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   settings = get_settings()
#   print(settings.MONGO_URI)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Every value has a default so the process can boot in a bare environment;
# missing Cloudinary credentials are reported at startup, not here.
# =============================================================================

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Field names match the environment variable names exactly.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    NODE_ENV: str = Field(
        default="development",
        description="Environment name reported by /health (development, staging, production)"
    )

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=5001,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level"
    )

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------

    CORS_ORIGINS: str = Field(
        default="*",
        description="'*' for any origin, or a comma-separated allow-list"
    )

    FRONTEND_URL: str = Field(
        default="",
        description="Storefront URL, appended to the allow-list when one is configured"
    )

    # -------------------------------------------------------------------------
    # MongoDB
    # -------------------------------------------------------------------------

    MONGO_URI: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string"
    )

    MONGO_DB_NAME: str = Field(
        default="catering",
        description="Database holding the storefront collections"
    )

    MONGO_CONNECT_TIMEOUT_MS: int = Field(
        default=5000,
        ge=100,
        description="Server selection timeout used for the startup ping"
    )

    # -------------------------------------------------------------------------
    # Cloudinary
    # -------------------------------------------------------------------------

    CLOUDINARY_CLOUD_NAME: str = Field(default="", description="Cloudinary cloud name")
    CLOUDINARY_API_KEY: str = Field(default="", description="Cloudinary API key")
    CLOUDINARY_API_SECRET: str = Field(default="", description="Cloudinary API secret")

    CLOUDINARY_FOLDER: str = Field(
        default="catering",
        description="Folder that uploaded images are stored under"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    JWT_SECRET: str = Field(
        default="dev-secret-key-change-in-production",
        min_length=16,
        description="Secret key for signing access tokens (HS256)"
    )

    JWT_EXPIRES_MINUTES: int = Field(
        default=60 * 24 * 7,
        ge=1,
        description="Access token lifetime in minutes"
    )

    ADMIN_EMAILS: str = Field(
        default="",
        description="Comma-separated emails that register with the admin role"
    )

    # -------------------------------------------------------------------------
    # Request / Lifecycle Limits
    # -------------------------------------------------------------------------

    MAX_BODY_SIZE_MB: int = Field(
        default=10,
        ge=1,
        le=500,
        description="Maximum request body size in MB"
    )

    SHUTDOWN_TIMEOUT_SECONDS: int = Field(
        default=30,
        ge=1,
        description="Seconds to drain in-flight requests before force-closing connections"
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
    def cors_allow_all(self) -> bool:
        """True when no explicit allow-list is configured."""
        return self.CORS_ORIGINS.strip() in ("", "*")

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Origins passed to the CORS middleware.

        Returns ["*"] for the wildcard policy. Otherwise the configured
        origins plus FRONTEND_URL, in order, with empties and repeats removed.
        Example: "http://localhost:3000, https://shop.example" -> ["http://localhost:3000", "https://shop.example"]
        """
        if self.cors_allow_all:
            return ["*"]

        origins: list[str] = []
        for origin in [*self.CORS_ORIGINS.split(","), self.FRONTEND_URL]:
            origin = origin.strip()
            if origin and origin not in origins:
                origins.append(origin)
        return origins

    @property
    def admin_emails_list(self) -> list[str]:
        """Parse ADMIN_EMAILS into lower-cased addresses."""
        return [email.strip().lower() for email in self.ADMIN_EMAILS.split(",") if email.strip()]

    @property
    def max_body_size_bytes(self) -> int:
        """Convert MB to bytes for body size checks."""
        return self.MAX_BODY_SIZE_MB * 1024 * 1024

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.NODE_ENV == "development"


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
