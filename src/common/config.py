"""
Configuration management for the SFShop checkout E2E suite.

This module provides configuration loading from environment variables
and an optional TOML file, with type-safe settings classes.
"""

import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidConfigError, MissingConfigError

DEFAULT_BASE_URL = "https://stg.sfshop.id"


class SiteSettings(BaseSettings):
    """Site under test and browser session settings."""

    model_config = SettingsConfigDict(
        env_prefix="E2E_",
        extra="ignore",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Storefront base URL")
    headless: bool = Field(default=True, description="Run browsers headless")
    slow_mo: int = Field(default=0, ge=0, description="Slow motion delay in ms")
    locale: str = Field(default="id-ID", description="Browser locale")
    timezone_id: str = Field(default="Asia/Jakarta", description="Browser timezone")
    action_timeout: int = Field(
        default=15_000, ge=0, description="Timeout for clicks and fills in ms"
    )
    navigation_timeout: int = Field(
        default=60_000, ge=0, description="Timeout for page loads in ms"
    )
    results_dir: Path = Field(
        default=Path("test-results"), description="Directory for test artifacts"
    )
    record_video: bool = Field(default=False, description="Record video per test")
    record_trace: bool = Field(default=False, description="Record trace per test")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")


class TimeoutSettings(BaseSettings):
    """Named timeout tiers used by the page objects (milliseconds)."""

    model_config = SettingsConfigDict(
        env_prefix="TIMEOUT_",
        extra="ignore",
    )

    short: int = Field(default=5_000, ge=0, description="Elements that appear quickly")
    medium: int = Field(default=15_000, ge=0, description="Interactions")
    long: int = Field(default=60_000, ge=0, description="Page loads")
    very_long: int = Field(default=120_000, ge=0, description="Payment processing")


class RetrySettings(BaseSettings):
    """Defaults for the action retrier and status poller."""

    model_config = SettingsConfigDict(
        env_prefix="RETRY_",
        extra="ignore",
    )

    max_attempts: int = Field(default=3, ge=1, description="Attempts per retried action")
    poll_interval: int = Field(
        default=3_000, ge=1, description="Delay between status polls in ms"
    )
    poll_deadline: int = Field(
        default=120_000, ge=1, description="Wall-clock budget for status polling in ms"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    file: Optional[str] = Field(None, description="Log file path")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SFSHOP_E2E_",
        extra="ignore",
    )

    environment: str = Field(default="staging", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")

    # Sub-settings
    site: SiteSettings = Field(default_factory=SiteSettings)
    timeouts: TimeoutSettings = Field(default_factory=TimeoutSettings)
    retry: RetrySettings = Field(default_factory=RetrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml(cls, path: str | Path) -> "Settings":
        """
        Load settings from a TOML configuration file.

        Args:
            path: Path to the TOML configuration file.

        Returns:
            Settings instance with loaded configuration.

        Raises:
            MissingConfigError: If the file does not exist.
            InvalidConfigError: If the file cannot be parsed.
        """
        path = Path(path)
        if not path.exists():
            raise MissingConfigError(str(path))

        try:
            with open(path, "rb") as f:
                config_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise InvalidConfigError(
                config_key="config_file",
                value=str(path),
                reason=f"Failed to parse TOML: {e}",
            )

        return cls._from_dict(config_data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Create settings from a dictionary keyed by TOML section."""
        settings_kwargs: dict[str, Any] = {}

        if "app" in data:
            settings_kwargs.update(data["app"])

        if "site" in data:
            settings_kwargs["site"] = SiteSettings(**data["site"])

        if "timeouts" in data:
            settings_kwargs["timeouts"] = TimeoutSettings(**data["timeouts"])

        if "retry" in data:
            settings_kwargs["retry"] = RetrySettings(**data["retry"])

        if "logging" in data:
            settings_kwargs["logging"] = LoggingSettings(**data["logging"])

        return cls(**settings_kwargs)

    def validate_required(self) -> None:
        """
        Validate settings that only make sense together.

        Raises:
            InvalidConfigError: If the poll interval exceeds the deadline.
        """
        if self.retry.poll_interval > self.retry.poll_deadline:
            raise InvalidConfigError(
                config_key="RETRY_POLL_INTERVAL",
                value=self.retry.poll_interval,
                reason="poll interval cannot exceed the poll deadline",
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached suite settings.

    Settings come from environment variables, or from the TOML file named
    by SFSHOP_E2E_CONFIG_FILE when it exists. The result is cached.
    """
    config_file = os.getenv("SFSHOP_E2E_CONFIG_FILE")

    if config_file and Path(config_file).exists():
        settings = Settings.from_toml(config_file)
    else:
        settings = Settings()

    return settings


def reload_settings() -> Settings:
    """Reload settings, clearing the cache."""
    get_settings.cache_clear()
    return get_settings()
