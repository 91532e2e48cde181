"""
Environment tag builder.

Turns an Environment into a TagSet. The generated pairs are:

    - "service", with the service name, if included
    - "host", with the host name, if included
    - "instance", with the instance name, if included
    - one pair per environment tag whose key is not excluded

Environment tags are added after the built-in keys, so an environment tag
named like a built-in key replaces the built-in value. Exclusion applies to
environment tags only.

Dependencies: envtags.core.tag_set
System role: Pure transformation from deployment context to telemetry tags
"""

from collections.abc import Collection
from dataclasses import dataclass
from typing import Any, Final

from envtags.core.environment import Environment
from envtags.core.tag_set import TagSet


class TagKeys:
    """Well-known keys for environment tags. Never configurable."""

    SERVICE: Final[str] = "service"
    HOST: Final[str] = "host"
    INSTANCE: Final[str] = "instance"


@dataclass(frozen=True)
class TagPolicy:
    """
    Resolved inclusion and exclusion choices for the tag builder.

    Attributes:
        include_service: Add the "service" tag
        include_host: Add the "host" tag
        include_instance: Add the "instance" tag
        exclude: Environment tag keys to leave out
    """
    include_service: bool
    include_host: bool
    include_instance: bool
    exclude: frozenset[str]


def tag_value_to_str(value: Any) -> str:
    """
    Convert an environment tag value to its tag string.

    Booleans use the lowercase spelling found in configuration files.

    Args:
        value: Environment tag value

    Returns:
        str: String representation of the value
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_environment_tags(
    environment: Environment,
    include_service: bool,
    include_host: bool,
    include_instance: bool,
    exclude: Collection[str],
) -> TagSet:
    """
    Turn the information enclosed in an Environment into a TagSet.

    Args:
        environment: Deployment context to read from (never modified)
        include_service: Add the "service" tag
        include_host: Add the "host" tag
        include_instance: Add the "instance" tag
        exclude: Environment tag keys to leave out; unknown keys are ignored

    Returns:
        TagSet: Newly created immutable tag set
    """
    excluded = exclude if isinstance(exclude, (set, frozenset)) else frozenset(exclude)
    builder = TagSet.builder()

    if include_service:
        builder.add(TagKeys.SERVICE, environment.service)

    if include_host:
        builder.add(TagKeys.HOST, environment.host)

    if include_instance:
        builder.add(TagKeys.INSTANCE, environment.instance)

    for key, value in environment.tags.items():
        if key not in excluded:
            builder.add(key, tag_value_to_str(value))

    return builder.create()


def build_tags(environment: Environment, policy: TagPolicy) -> TagSet:
    """Turn an Environment into a TagSet using a resolved TagPolicy."""
    return build_environment_tags(
        environment,
        policy.include_service,
        policy.include_host,
        policy.include_instance,
        policy.exclude,
    )
