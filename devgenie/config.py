"""Service configuration with pydantic-settings.

Requires: DATABASE_URL
Optional: OPENAI_API_KEY, CLAUDE_API_KEY, GEMINI_API_KEY (each enables one provider),
GITHUB_API_KEY (raises the repository search rate limit), AUTH_JWT_SECRET.

Usage:
    from devgenie.config import get_settings

    settings = get_settings()
    credentials = settings.provider_credentials()
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .providers.base import ProviderCredentials


class Settings(BaseSettings):
    """Dev Genie API settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Required ===

    database_url: str = Field(
        ...,
        description="Async SQLAlchemy connection URL",
        examples=["postgresql+asyncpg://user:pass@db:5432/devgenie"],
    )

    # === Provider credentials (absence disables the provider) ===

    openai_api_key: str | None = Field(default=None, description="OpenAI API key")
    claude_api_key: str | None = Field(default=None, description="Anthropic API key")
    gemini_api_key: str | None = Field(default=None, description="Google Gemini API key")
    github_api_key: str | None = Field(
        default=None,
        description="GitHub token for repository search (anonymous search when unset)",
    )

    provider_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Upper bound for one provider call, in seconds",
    )

    # === Auth ===

    auth_jwt_secret: str | None = Field(
        default=None,
        description="HS256 secret of the auth service; tokens are trusted as given when unset",
    )

    # === Logging ===

    service_name: str = Field(
        default="devgenie",
        description="Service name for structured logging",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @field_validator("openai_api_key", "claude_api_key", "gemini_api_key", "github_api_key")
    @classmethod
    def blank_key_is_unset(cls, v: str | None) -> str | None:
        """Treat an empty env var as a missing credential."""
        if v is None or not v.strip():
            return None
        return v.strip()

    def provider_credentials(self) -> ProviderCredentials:
        """Explicit credential set handed to the fan-out coordinator."""
        return ProviderCredentials(
            openai=self.openai_api_key,
            claude=self.claude_api_key,
            gemini=self.gemini_api_key,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Validates required env vars on first call.
    Raises ValidationError if DATABASE_URL is missing.
    """
    return Settings()
