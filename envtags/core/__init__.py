"""
Core tag-building module.

Contains the environment descriptor, the immutable tag set, the tag builder
and the exception hierarchy. Nothing in here performs I/O.
"""

from envtags.core.environment import Environment
from envtags.core.exceptions import (
    ConfigPathNotFoundError,
    ConfigurationError,
    EnvTagsException,
)
from envtags.core.tag_builder import (
    TagKeys,
    TagPolicy,
    build_environment_tags,
    build_tags,
    tag_value_to_str,
)
from envtags.core.tag_set import TagSet, TagSetBuilder

__all__ = [
    "Environment",
    "TagSet",
    "TagSetBuilder",
    "TagPolicy",
    "TagKeys",
    "build_environment_tags",
    "build_tags",
    "tag_value_to_str",
    "EnvTagsException",
    "ConfigurationError",
    "ConfigPathNotFoundError",
]
