"""
Environment descriptor settings.

Describes the running process (service, host, instance, extra tags) from
environment variables and resolves "auto" placeholders from the machine.

Dependencies: pydantic, pydantic_settings
System role: Source of the Environment handed to the tag builder
"""

import socket
from typing import Any

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from envtags.configs.base import BaseSettings
from envtags.configs.constants import AUTO, DEFAULT_SERVICE, UNKNOWN_HOST
from envtags.core.environment import Environment
from envtags.observability.logger import get_logger

logger = get_logger(__name__)


def resolve_hostname() -> str:
    """
    Get the machine host name.

    Returns:
        str: Host name, or a placeholder when it cannot be determined
    """
    try:
        return socket.gethostname()
    except OSError as e:
        logger.warning(f"Could not resolve host name, using {UNKNOWN_HOST}: {e}")
        return UNKNOWN_HOST


class EnvironmentSettings(BaseSettings):
    """Deployment context of the running process."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ENVTAGS_ENV_",
        case_sensitive=False,
        extra="ignore",
    )

    service: str = Field(default=DEFAULT_SERVICE, description="Service name")
    host: str = Field(default=AUTO, description='Host name, "auto" to detect it')
    instance: str = Field(
        default=AUTO,
        description='Instance identifier, "auto" for "{service}@{host}"',
    )
    tags: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra descriptive tags (JSON object in env vars)",
    )

    def to_environment(self) -> Environment:
        """
        Build the Environment described by these settings.

        Returns:
            Environment: Descriptor with "auto" host and instance resolved
        """
        host = resolve_hostname() if self.host == AUTO else self.host
        instance = f"{self.service}@{host}" if self.instance == AUTO else self.instance
        return Environment(
            service=self.service,
            host=host,
            instance=instance,
            tags=self.tags,
        )
