"""Tests for the Environment descriptor."""

import dataclasses

import pytest

from envtags.core.environment import Environment


class TestEnvironment:
    """Tests for Environment."""

    def test_defaults_to_no_tags(self) -> None:
        """Tags are optional."""
        environment = Environment(service="svc", host="h", instance="i")

        assert dict(environment.tags) == {}

    def test_is_frozen(self) -> None:
        """Fields cannot be reassigned."""
        environment = Environment(service="svc", host="h", instance="i")

        with pytest.raises(dataclasses.FrozenInstanceError):
            environment.service = "other"  # type: ignore[misc]

    def test_tags_are_read_only_copy(self) -> None:
        """Tags are copied and cannot be modified through the descriptor."""
        source = {"region": "us-east"}
        environment = Environment(service="svc", host="h", instance="i", tags=source)
        source["region"] = "changed"

        assert environment.tags["region"] == "us-east"
        with pytest.raises(TypeError):
            environment.tags["region"] = "x"  # type: ignore[index]

    def test_tags_keep_insertion_order(self) -> None:
        """Tags iterate in the order they were given."""
        environment = Environment(
            service="svc", host="h", instance="i", tags={"z": 1, "a": 2, "m": 3}
        )

        assert list(environment.tags) == ["z", "a", "m"]

    def test_equality_and_hash(self) -> None:
        """Descriptors with equal fields are equal and hashable."""
        left = Environment(service="svc", host="h", instance="i", tags={"a": "1"})
        right = Environment(service="svc", host="h", instance="i", tags={"a": "1"})

        assert left == right
        assert hash(left) == hash(right)
        assert left != Environment(service="svc", host="h", instance="i")
