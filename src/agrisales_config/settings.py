"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. AGRISALES_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - shared defaults

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. AGRISALES_ENV_FILE env var (absolute, or relative to the project root)
    2. config/.env.dev (local development)
    3. config/.env
    """
    env_file_path = os.environ.get("AGRISALES_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    default_env = config_dir / ".env"
    if default_env.exists():
        return default_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values

    Every field has a default, so the engine runs without any .env file.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "AgriSales"

    # Dataset
    category_set: Literal["current", "legacy"] = "current"
    currency_code: str = "USD"  # Display only, never used in computation

    # Reporting periods
    # The rolling window is fixed, never computed relative to today
    rolling_window_start: date = date(2024, 10, 1)
    rolling_window_end: date = date(2025, 9, 30)
    default_period: str = "past-12-months"
    leaderboard_size: int = 10

    # Demo data (DEMO_ prefix)
    demo_random_seed: int = 42
    demo_customer_count: int = 30

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @field_validator("category_set", mode="before")
    @classmethod
    def _normalize_category_set(cls, v: Any) -> str:
        """Accept any letter case and surrounding whitespace."""
        return str(v).strip().lower()

    @field_validator("currency_code", "log_level", mode="before")
    @classmethod
    def _uppercase(cls, v: Any) -> str:
        return str(v).strip().upper()

    @field_validator("leaderboard_size", "demo_customer_count")
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v <= 0:
            msg = f"Value must be a positive integer, got {v}"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def _validate_rolling_window(self) -> Settings:
        if self.rolling_window_end < self.rolling_window_start:
            msg = (
                f"rolling_window_end ({self.rolling_window_end}) must not be "
                f"before rolling_window_start ({self.rolling_window_start})"
            )
            raise ValueError(msg)
        return self

    # Computed properties
    @computed_field  # type: ignore[prop-decorator]
    @property
    def rolling_window_days(self) -> int:
        """Length of the rolling window in days, both ends included."""
        return (self.rolling_window_end - self.rolling_window_start).days + 1


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
