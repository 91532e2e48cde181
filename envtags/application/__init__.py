"""
Application layer.

Glue that resolves configuration and describes the running environment
before calling the tag builder.
"""

from envtags.application.tag_service import (
    current_environment_tags,
    tags_from_config,
    tags_from_path,
)

__all__ = ["current_environment_tags", "tags_from_config", "tags_from_path"]
