"""
Centralized settings for the calculators.

Holds the configured inputs a host feeds to each engine. Defaults can be
overridden with CALC_TOOL_* environment variables or a .env file.
"""
from decimal import Decimal
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configured calculator inputs with sensible defaults."""

    # Bookstore calculator
    cover_price: Decimal = Field(default=Decimal("24.95"), allow_inf_nan=False)
    number_of_copies: int = 60

    # Bill breakdown calculator
    dollar_amount: int = 247

    model_config = SettingsConfigDict(
        env_prefix="CALC_TOOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def load(cls, **overrides) -> 'Settings':
        """Load settings from the environment; keyword overrides win."""
        return cls(**overrides)


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings() -> None:
    """Drop the cached instance so the next get_settings() reloads."""
    global _settings
    _settings = None
