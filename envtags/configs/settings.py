"""
Unified application settings.

Aggregates the envtags configuration into a single Settings class and
provides cached accessors for the settings and the configuration store,
plus helpers to reload them and to apply the logging settings.

Dependencies: All config modules
System role: Central configuration aggregator for the package
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from envtags.configs.base import BaseSettings
from envtags.configs.config_store import ConfigStore
from envtags.configs.environment import EnvironmentSettings
from envtags.observability.logger import configure_logging


class Settings(BaseSettings):
    """Unified envtags settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ENVTAGS_",
        case_sensitive=False,
        extra="ignore",
    )

    config_file: Path | None = Field(
        default=None,
        description="JSON or YAML file holding environment tags sections",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    env: EnvironmentSettings = Field(default_factory=EnvironmentSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once, on first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from envtags.configs import get_settings
        settings = get_settings()
    """
    return Settings()


@lru_cache
def get_config_store() -> ConfigStore:
    """
    Get the configuration store named by the settings.

    The file is read once; call reload_config() after editing it.

    Returns:
        ConfigStore: Store over the configured file, or an empty store when
        no file is configured
    """
    config_file = get_settings().config_file
    if config_file is None:
        return ConfigStore()
    return ConfigStore.load(config_file)


def reload_config() -> ConfigStore:
    """
    Drop cached settings and re-read the configuration file.

    Tags built afterwards through current_environment_tags() or
    tags_from_path() without an explicit store see the new configuration.

    Returns:
        ConfigStore: Freshly loaded configuration store
    """
    get_settings.cache_clear()
    get_config_store.cache_clear()
    return get_config_store()


def configure_from_settings(settings: Settings | None = None) -> None:
    """
    Configure root logging from ENVTAGS_LOG_LEVEL and ENVTAGS_DEBUG.

    Debug mode forces DEBUG level regardless of the configured log level.

    Args:
        settings: Settings to apply (defaults to get_settings())
    """
    settings = settings or get_settings()
    configure_logging(logging.DEBUG if settings.debug else settings.log_level)
