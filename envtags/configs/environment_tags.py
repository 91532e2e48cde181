"""
Environment tags configuration.

Reads the options controlling which environment information becomes tags.
A section looks like:

    include-host: yes
    include-service: yes
    include-instance: yes
    exclude: []

Every option is optional; missing options include all environment
information.

Dependencies: pydantic
System role: Adapter from a configuration section to a TagPolicy
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from envtags.configs.config_store import ConfigStore
from envtags.configs.constants import (
    EXCLUDE_OPTION,
    INCLUDE_HOST_OPTION,
    INCLUDE_INSTANCE_OPTION,
    INCLUDE_SERVICE_OPTION,
)
from envtags.core.exceptions import ConfigurationError
from envtags.core.tag_builder import TagPolicy


class EnvironmentTagsConfig(BaseModel):
    """
    Environment tags options with include-everything defaults.

    Attributes:
        include_host: Add the "host" tag
        include_service: Add the "service" tag
        include_instance: Add the "instance" tag
        exclude: Environment tag keys to leave out
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    include_host: bool = Field(default=True, alias=INCLUDE_HOST_OPTION)
    include_service: bool = Field(default=True, alias=INCLUDE_SERVICE_OPTION)
    include_instance: bool = Field(default=True, alias=INCLUDE_INSTANCE_OPTION)
    exclude: frozenset[str] = Field(default_factory=frozenset, alias=EXCLUDE_OPTION)

    @classmethod
    def from_section(
        cls,
        section: Mapping[str, Any] | ConfigStore,
        path: str | None = None,
    ) -> "EnvironmentTagsConfig":
        """
        Validate a configuration section.

        Args:
            section: Options mapping or config store section
            path: Dotted path the section was read from, for error reporting

        Returns:
            EnvironmentTagsConfig: Validated options

        Raises:
            ConfigurationError: If an option has the wrong type
        """
        data = section.to_dict() if isinstance(section, ConfigStore) else dict(section)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            options = sorted({str(error["loc"][0]) for error in e.errors() if error["loc"]})
            raise ConfigurationError(
                "Invalid environment tags configuration",
                path=path,
                details={"options": options, "errors": e.error_count()},
            ) from e

    def to_policy(self) -> TagPolicy:
        """Return the resolved policy for the tag builder."""
        return TagPolicy(
            include_service=self.include_service,
            include_host=self.include_host,
            include_instance=self.include_instance,
            exclude=self.exclude,
        )
