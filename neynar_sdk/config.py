"""
Client Configuration

Loads Neynar client settings from environment variables and .env files.
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.neynar.com"


class NeynarSettings(BaseSettings):
    """Neynar API configuration."""

    model_config = SettingsConfigDict(
        env_prefix="NEYNAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: Optional[str] = None
    # Service root; each API version appends its own /v1 or /v2
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        if not (v.startswith("http://") or v.startswith("https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()


def get_settings() -> NeynarSettings:
    """Create a settings instance from environment variables and .env files."""
    return NeynarSettings()
