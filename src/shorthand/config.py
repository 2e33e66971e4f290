"""Configuration management for Shorthand."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CARET_PLACEHOLDER = "{%::zen-caret::%}"


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Reserved token marking where the cursor should end up
    caret_placeholder: str = Field(
        default=DEFAULT_CARET_PLACEHOLDER,
        alias="SHORTHAND_CARET_PLACEHOLDER",
    )

    default_syntax: str = Field(
        default="html",
        alias="SHORTHAND_SYNTAX",
    )

    # JSON resource file used by the CLI when --resources is not given
    resources_file: Optional[Path] = Field(
        default=None,
        alias="SHORTHAND_RESOURCES",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
