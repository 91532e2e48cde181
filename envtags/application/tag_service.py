"""
Environment tags service.

Convenience entry points for reporters: read the environment tags options
from a configuration object or path, apply the include-everything defaults,
and build the TagSet. Tag sets are never cached here; call again whenever the
environment or configuration changes.

Dependencies: envtags.configs, envtags.core
System role: Configuration-to-tags orchestration for telemetry reporters
"""

import logging
from collections.abc import Mapping
from typing import Any

from envtags.configs.config_store import ConfigStore
from envtags.configs.environment_tags import EnvironmentTagsConfig
from envtags.configs.settings import get_config_store, get_settings
from envtags.core.environment import Environment
from envtags.core.tag_builder import TagKeys, build_tags
from envtags.core.tag_set import TagSet
from envtags.observability.log_utils import log_with_context
from envtags.observability.logger import get_logger

logger = get_logger(__name__)


def _included_builtin_keys(config: EnvironmentTagsConfig) -> set[str]:
    included = set()
    if config.include_service:
        included.add(TagKeys.SERVICE)
    if config.include_host:
        included.add(TagKeys.HOST)
    if config.include_instance:
        included.add(TagKeys.INSTANCE)
    return included


def _log_shadowed_builtins(environment: Environment, config: EnvironmentTagsConfig) -> None:
    # Environment tags replace built-in values of the same key
    included = _included_builtin_keys(config)
    shadowed = sorted(
        key for key in environment.tags if key in included and key not in config.exclude
    )
    if shadowed and logger.isEnabledFor(logging.DEBUG):
        log_with_context(
            logger,
            logging.DEBUG,
            f"Environment tags override built-in tags: {', '.join(shadowed)}",
            shadowed_keys=",".join(shadowed),
            service=environment.service,
            excluded=config.exclude,
        )


def tags_from_config(
    environment: Environment,
    config: EnvironmentTagsConfig | ConfigStore | Mapping[str, Any],
    path: str | None = None,
) -> TagSet:
    """
    Build environment tags using options from a configuration section.

    Missing options default to including all environment information.

    Args:
        environment: Deployment context to turn into tags
        config: Validated options, a config store section or a raw mapping
        path: Dotted path the section was read from, for error reporting

    Returns:
        TagSet: Environment tags

    Raises:
        ConfigurationError: If an option has the wrong type
    """
    if not isinstance(config, EnvironmentTagsConfig):
        config = EnvironmentTagsConfig.from_section(config, path=path)

    _log_shadowed_builtins(environment, config)
    return build_tags(environment, config.to_policy())


def tags_from_path(
    environment: Environment,
    path: str,
    store: ConfigStore | None = None,
) -> TagSet:
    """
    Build environment tags using the configuration section at a path.

    Args:
        environment: Deployment context to turn into tags
        path: Dotted path of the environment tags section
        store: Configuration store (defaults to the application store)

    Returns:
        TagSet: Environment tags

    Raises:
        ConfigPathNotFoundError: If the path does not exist
        ConfigurationError: If the section or its options are invalid
    """
    store = store if store is not None else get_config_store()
    return tags_from_config(environment, store.get_section(path), path=path)


def current_environment_tags(path: str) -> TagSet:
    """
    Build tags for the running process from application settings.

    Args:
        path: Dotted path of the environment tags section

    Returns:
        TagSet: Environment tags for the current process
    """
    environment = get_settings().env.to_environment()
    return tags_from_path(environment, path)
