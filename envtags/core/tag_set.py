"""
Immutable tag set.

Provides TagSet, a read-only string-to-string mapping safe to share across
threads and reporters, and TagSetBuilder for accumulating pairs where a later
add for the same key overwrites the earlier value.

Dependencies: collections.abc
System role: Result container for environment tags
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType


class TagSetBuilder:
    """Accumulates tag pairs before freezing them into a TagSet."""

    def __init__(self) -> None:
        self._pairs: dict[str, str] = {}

    def add(self, key: str, value: str) -> "TagSetBuilder":
        """
        Add a tag pair, replacing any value already stored under the key.

        Args:
            key: Tag key
            value: Tag value

        Returns:
            TagSetBuilder: This builder, for chaining

        Raises:
            TypeError: If key or value is not a string
        """
        if not isinstance(key, str):
            raise TypeError(f"Tag key must be str, got {type(key).__name__}")
        if not isinstance(value, str):
            raise TypeError(f"Tag value for '{key}' must be str, got {type(value).__name__}")
        self._pairs[key] = value
        return self

    def add_all(self, tags: Mapping[str, str]) -> "TagSetBuilder":
        """Add every pair of a mapping in its iteration order."""
        for key, value in tags.items():
            self.add(key, value)
        return self

    def create(self) -> "TagSet":
        """Freeze the accumulated pairs into a new TagSet."""
        return TagSet._from_trusted(dict(self._pairs))


class TagSet(Mapping[str, str]):
    """
    Immutable, deduplicated collection of string tags.

    Equality is by key/value content against any mapping. Iteration follows
    the order in which keys were first added.
    """

    __slots__ = ("_pairs", "_hash")

    def __init__(self, tags: Mapping[str, str] | None = None) -> None:
        builder = TagSetBuilder()
        if tags:
            builder.add_all(tags)
        self._pairs: Mapping[str, str] = MappingProxyType(builder._pairs)
        self._hash: int | None = None

    @classmethod
    def _from_trusted(cls, pairs: dict[str, str]) -> "TagSet":
        tag_set = cls.__new__(cls)
        tag_set._pairs = MappingProxyType(pairs)
        tag_set._hash = None
        return tag_set

    @staticmethod
    def builder() -> TagSetBuilder:
        """Create an empty builder."""
        return TagSetBuilder()

    @classmethod
    def empty(cls) -> "TagSet":
        """Return a TagSet with no tags."""
        return cls._from_trusted({})

    @classmethod
    def of(cls, tags: Mapping[str, str]) -> "TagSet":
        """Create a TagSet holding the pairs of a mapping."""
        if isinstance(tags, TagSet):
            return tags
        return cls(tags)

    def with_tag(self, key: str, value: str) -> "TagSet":
        """Return a new TagSet with the pair added, replacing an existing key."""
        return TagSetBuilder().add_all(self).add(key, value).create()

    def with_tags(self, other: Mapping[str, str]) -> "TagSet":
        """Return a new TagSet merging other into this one. Other wins on collision."""
        return TagSetBuilder().add_all(self).add_all(other).create()

    def to_dict(self) -> dict[str, str]:
        """Return a mutable copy of the tags."""
        return dict(self._pairs)

    def __getitem__(self, key: str) -> str:
        return self._pairs[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self._pairs) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._pairs.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"TagSet({dict(self._pairs)!r})"
