"""
Hierarchical configuration store.

Wraps a nested mapping loaded from a JSON or YAML file and resolves
dot-separated paths such as "reporters.prometheus.environment-tags".

Dependencies: PyYAML, json (stdlib)
System role: Configuration source for the environment tags adapter
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from envtags.configs.constants import JSON_SUFFIXES, YAML_SUFFIXES
from envtags.core.exceptions import ConfigPathNotFoundError, ConfigurationError
from envtags.observability.logger import get_logger

logger = get_logger(__name__)

_MISSING = object()


class ConfigStore:
    """Read-only view over nested configuration data."""

    def __init__(self, data: Mapping[str, Any] | None = None, origin: str | None = None) -> None:
        """
        Initialize the store.

        Args:
            data: Nested configuration mapping
            origin: Where the data came from (file path), for error messages
        """
        self._data: Mapping[str, Any] = data or {}
        self.origin = origin

    @classmethod
    def load(cls, path: Path | str) -> "ConfigStore":
        """
        Load a configuration file.

        Args:
            path: Path to a .json, .yaml or .yml file

        Returns:
            ConfigStore: Store over the file contents

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the format is unsupported or the content is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        suffix = path.suffix.lower()
        text = path.read_text(encoding="utf-8")
        try:
            if suffix in YAML_SUFFIXES:
                data = yaml.safe_load(text)
            elif suffix in JSON_SUFFIXES:
                data = json.loads(text)
            else:
                raise ConfigurationError(
                    f"Unsupported config file format: {suffix or '<none>'}",
                    details={"file": str(path)},
                )
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Invalid config file: {path}",
                details={"error_type": type(e).__name__},
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Config file must contain a mapping at the root, got {type(data).__name__}",
                details={"file": str(path)},
            )

        logger.info(f"Loaded {len(data)} top-level config entries from {path}")
        return cls(data, origin=str(path))

    def _lookup(self, path: str) -> Any:
        node: Any = self._data
        for part in path.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def has_path(self, path: str) -> bool:
        """Check whether a value (including null) exists at the path."""
        return self._lookup(path) is not _MISSING

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get the value at a path.

        Args:
            path: Dot-separated path
            default: Returned when the path is missing

        Returns:
            Any: Stored value or default
        """
        value = self._lookup(path)
        return default if value is _MISSING else value

    def get_section(self, path: str) -> "ConfigStore":
        """
        Get the nested section at a path.

        Args:
            path: Dot-separated path

        Returns:
            ConfigStore: Store over the section

        Raises:
            ConfigPathNotFoundError: If the path does not exist
            ConfigurationError: If the path holds a non-mapping value
        """
        value = self._lookup(path)
        if value is _MISSING:
            raise ConfigPathNotFoundError(path, details={"origin": self.origin} if self.origin else None)
        if not isinstance(value, Mapping):
            raise ConfigurationError(
                f"Config path does not hold a section: {path}",
                path=path,
                details={"type": type(value).__name__},
            )
        return ConfigStore(value, origin=self.origin)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the data at this level."""
        return dict(self._data)

    def __repr__(self) -> str:
        return f"ConfigStore(origin={self.origin!r}, keys={sorted(self._data)!r})"
