"""Configuration management for the neuro scoring engine."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NEURO_SCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Results database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./neuro_score.db",
        description="SQLAlchemy async DSN for the neuro test results store",
    )

    # API Settings
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8080)
    api_key: str = Field(
        default="",
        description="API key for authenticating requests",
    )

    # Reports
    report_timezone: str = Field(
        default="America/Sao_Paulo",
        description="IANA timezone used to print administration dates in exports",
    )

    # Normative data
    validate_norms_on_load: bool = Field(
        default=True,
        description="Validate every normative table when the registry is built",
    )

    # Debug
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (exposes error details in responses)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    @property
    def has_api_key(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
