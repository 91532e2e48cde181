"""
Tag and configuration constants for envtags.

Contains recognized configuration option names and their defaults.
"""

from typing import Final

# Option names inside an environment-tags configuration section
INCLUDE_HOST_OPTION: Final[str] = "include-host"
INCLUDE_SERVICE_OPTION: Final[str] = "include-service"
INCLUDE_INSTANCE_OPTION: Final[str] = "include-instance"
EXCLUDE_OPTION: Final[str] = "exclude"

# Placeholder resolved from the machine when describing the environment
AUTO: Final[str] = "auto"
UNKNOWN_HOST: Final[str] = "<unknown-host>"
DEFAULT_SERVICE: Final[str] = "envtags-application"

# Configuration file formats understood by the config store
YAML_SUFFIXES: Final[frozenset[str]] = frozenset({".yaml", ".yml"})
JSON_SUFFIXES: Final[frozenset[str]] = frozenset({".json"})
