"""
Exception hierarchy for envtags.

Provides layered exception structure for configuration and adapter errors.
The tag builder itself raises nothing; these exceptions surface at the
configuration-resolution boundary.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the package
"""

from typing import Any


class EnvTagsException(Exception):
    """Base exception for all envtags errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(EnvTagsException):
    """Raised when a configuration section cannot be read or validated."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            path: Dotted configuration path involved in the failure
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        self.path = path
        super().__init__(message, details)


class ConfigPathNotFoundError(ConfigurationError):
    """Raised when a configuration path does not exist in the store."""

    def __init__(self, path: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize missing path error.

        Args:
            path: Dotted configuration path that was not found
            details: Additional context
        """
        super().__init__(f"Configuration path not found: {path}", path, details)
