"""Centralized configuration using Pydantic Settings

All environment variables are managed here. Variables are prefixed with
MIXED_SIGNALS_ (e.g. MIXED_SIGNALS_PLOT_WIDTH=100).
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="MIXED_SIGNALS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shuffle Configuration
    constrained_shuffle_budget: int = Field(default=1000, ge=0)

    # Plot Configuration
    plot_width: int = Field(default=72, ge=2)
    plot_height: int = Field(default=12, ge=2)

    # Logging Configuration
    log_level: str = "WARNING"

    # Spec serialization
    serialization_format: Literal["json", "msgpack"] = "json"


def get_settings() -> Settings:
    """Read settings from the environment.

    Builds a fresh instance on every call so there is no module-level state.
    """
    return Settings()
