"""
Configuration management module.

Provides type-safe configuration using Pydantic Settings, the hierarchical
configuration store and the environment tags options adapter.
"""

from envtags.configs.config_store import ConfigStore
from envtags.configs.environment import EnvironmentSettings
from envtags.configs.environment_tags import EnvironmentTagsConfig
from envtags.configs.settings import (
    Settings,
    configure_from_settings,
    get_config_store,
    get_settings,
    reload_config,
)

__all__ = [
    "ConfigStore",
    "EnvironmentSettings",
    "EnvironmentTagsConfig",
    "Settings",
    "configure_from_settings",
    "reload_config",
    "get_config_store",
    "get_settings",
]
