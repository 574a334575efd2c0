"""
Configuration management for the Tweede Kamer Attendance API.

Supports multiple environments (local, development, production) with
different upstream and server settings.

Responsibility: Centralized configuration and environment management
"""

from enum import Enum
from typing import List
import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment"""
    LOCAL = "local"
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class UpstreamConfig(BaseSettings):
    """Tweede Kamer OData source configuration"""

    base_url: str = Field(
        default="https://gegevensmagazijn.tweedekamer.nl/OData/v4/2.0",
        description="Root of the OData v4 service (no trailing slash)"
    )
    timeout_seconds: float = Field(default=30.0)
    user_agent: str = Field(default="TweedeKamerAttendance/1.0")

    # Query defaults
    default_limit: int = Field(default=1000)
    stats_sample_size: int = Field(default=100)
    participant_relation: str = Field(default="Deelnemer")

    # Formatting
    display_timezone: str = Field(default="Europe/Amsterdam")

    model_config = SettingsConfigDict(
        env_prefix="UPSTREAM_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class AppConfig(BaseSettings):
    """Application configuration"""

    # Environment
    environment: Environment = Field(default=Environment.LOCAL)
    debug: bool = Field(default=True)

    # Application metadata
    app_name: str = Field(default="Dutch Parliament Attendance API")
    app_version: str = Field(default="1.0.0")

    # Logging
    log_level: str = Field(default="INFO")

    # API settings
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=3000)

    # CORS settings
    cors_origins: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins (JSON list or comma-separated in env)"
    )

    # Frontend files served next to the API
    static_dir: str = Field(default="public")

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from JSON string or comma-separated list"""
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            v = v.strip()
            # Remove outer quotes if present (some hosts wrap JSON strings in quotes)
            if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
                v = v[1:-1]
            # Try parsing as JSON first
            if v.startswith("["):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            # Fall back to comma-separated
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class Settings(BaseSettings):
    """
    Global settings container.

    Loads configuration from:
    1. Environment variables
    2. .env file
    3. Default values

    Example:
        # Local development
        settings = Settings()

        # Point at a mirror of the OData service
        settings = Settings(
            upstream=UpstreamConfig(base_url="http://localhost:8080/OData/v4/2.0")
        )
    """

    app: AppConfig = Field(default_factory=AppConfig)
    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
