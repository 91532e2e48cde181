"""
Environment descriptor.

Describes the running process: the service it belongs to, the host it runs
on, its instance identifier and any extra descriptive tags.

Dependencies: dataclasses
System role: Input value for the tag builder
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Environment:
    """
    Static deployment context of a running process.

    Attributes:
        service: Service name
        host: Host name
        instance: Instance identifier
        tags: Extra descriptive tags; values are stringified when turned into tags
    """
    service: str
    host: str
    instance: str
    tags: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copy so callers holding the original dict can't change us
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    def __hash__(self) -> int:
        return hash((self.service, self.host, self.instance))
