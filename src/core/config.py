"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. The Settings instance is built once per process and passed into the
container, which hands it to the identity provider and store adapters.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Identity provider credentials are optional at load time; their absence is
  reported per request as a ConfigurationError (HTTP 500), not as a crash

Usage:
    from src.core.config import settings

    # Access config
    base_url = settings.supabase_url

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import (
    IDENTITY_TIMEOUT_DEFAULT,
    STORE_TIMEOUT_DEFAULT,
)
from src.core.enums import Environment


class Settings(BaseSettings):
    """Bookkeeper API settings, read from environment variables.

    Variable names are case-insensitive (SUPABASE_URL or supabase_url).
    Secrets have no defaults; everything else falls back to local
    development values.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(default=False, description="FastAPI debug mode")
    host: str = Field(default="0.0.0.0", description="uvicorn bind host")
    port: int = Field(default=4000, description="uvicorn bind port")
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Bookkeeper",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # API configuration
    api_base_url: str = Field(
        default="http://localhost:4000",
        description="API base URL, used to build problem detail type URIs",
    )

    # CORS configuration
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)",
    )
    cors_allow_credentials: bool = Field(
        default=True,
        description="Allow cookies and authentication headers in CORS requests",
    )

    # Identity provider and row-level-security store (Supabase)
    supabase_url: str | None = Field(
        default=None,
        description="Supabase project URL (e.g., https://abc.supabase.co)",
    )
    supabase_anon_key: str | None = Field(
        default=None,
        description="Supabase anon (public) API key; row-level security applies",
    )
    identity_timeout_seconds: float = Field(
        default=IDENTITY_TIMEOUT_DEFAULT,
        description="Timeout for token verification calls in seconds",
    )
    store_timeout_seconds: float = Field(
        default=STORE_TIMEOUT_DEFAULT,
        description="Timeout for data store calls in seconds",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("supabase_url", "supabase_anon_key")
    @classmethod
    def blank_as_unset(cls, v: str | None) -> str | None:
        """Empty or whitespace-only values count as not configured."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("supabase_url")
    @classmethod
    def strip_supabase_slash(cls, v: str | None) -> str | None:
        return v.rstrip("/") if v else v

    @field_validator("identity_timeout_seconds", "store_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Reject zero or negative timeouts."""
        if v <= 0:
            raise ValueError("timeout must be greater than 0")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        origins = (origin.strip() for origin in self.cors_origins.split(","))
        return [origin for origin in origins if origin]

    @property
    def is_supabase_configured(self) -> bool:
        """Check if identity provider credentials are present."""
        return self.supabase_url is not None and self.supabase_anon_key is not None

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """True when running locally with human-readable logs."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
