"""
envtags: telemetry tags from a process's deployment context.

Turns an Environment (service, host, instance, extra tags) into an immutable
TagSet suitable for stamping metrics and traces.
"""

from envtags.application.tag_service import (
    current_environment_tags,
    tags_from_config,
    tags_from_path,
)
from envtags.configs.config_store import ConfigStore
from envtags.configs.environment_tags import EnvironmentTagsConfig
from envtags.core import (
    ConfigPathNotFoundError,
    ConfigurationError,
    EnvTagsException,
    Environment,
    TagKeys,
    TagPolicy,
    TagSet,
    TagSetBuilder,
    build_environment_tags,
    build_tags,
)

__version__ = "0.1.0"

__all__ = [
    "Environment",
    "TagSet",
    "TagSetBuilder",
    "TagKeys",
    "TagPolicy",
    "build_environment_tags",
    "build_tags",
    "tags_from_config",
    "tags_from_path",
    "current_environment_tags",
    "ConfigStore",
    "EnvironmentTagsConfig",
    "EnvTagsException",
    "ConfigurationError",
    "ConfigPathNotFoundError",
]
