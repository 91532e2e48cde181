"""
Shared test fixtures and configuration for entire test suite.

Provides: Sample environments, config files, settings cache isolation
Dependencies: pytest, PyYAML
System role: Test infrastructure and fixture management
"""

import json
from pathlib import Path

import pytest
import yaml

from envtags.configs.settings import get_config_store, get_settings
from envtags.core.environment import Environment


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from cached settings and ENVTAGS_* variables."""
    for name in (
        "ENVTAGS_CONFIG_FILE",
        "ENVTAGS_LOG_LEVEL",
        "ENVTAGS_DEBUG",
        "ENVTAGS_ENV_SERVICE",
        "ENVTAGS_ENV_HOST",
        "ENVTAGS_ENV_INSTANCE",
        "ENVTAGS_ENV_TAGS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_config_store.cache_clear()
    yield
    get_settings.cache_clear()
    get_config_store.cache_clear()


@pytest.fixture
def orders_environment() -> Environment:
    """Environment whose tags collide with the built-in "host" key."""
    return Environment(
        service="orders",
        host="h1",
        instance="i1",
        tags={"region": "us-east", "host": "legacy-h0"},
    )


@pytest.fixture
def plain_environment() -> Environment:
    """Environment with tags that don't collide with built-in keys."""
    return Environment(
        service="billing",
        host="db-host-3",
        instance="billing@db-host-3",
        tags={"region": "eu-west", "env": "staging", "shard": 7},
    )


@pytest.fixture
def reporters_config() -> dict:
    """Nested configuration with environment tags sections for two reporters."""
    return {
        "reporters": {
            "prometheus": {
                "environment-tags": {
                    "include-host": False,
                    "exclude": ["region"],
                },
            },
            "zipkin": {
                "environment-tags": {},
            },
        },
    }


@pytest.fixture
def yaml_config_file(tmp_path: Path, reporters_config: dict) -> Path:
    """Write reporters_config to a YAML file."""
    config_file = tmp_path / "envtags.yaml"
    config_file.write_text(yaml.safe_dump(reporters_config), encoding="utf-8")
    return config_file


@pytest.fixture
def json_config_file(tmp_path: Path, reporters_config: dict) -> Path:
    """Write reporters_config to a JSON file."""
    config_file = tmp_path / "envtags.json"
    config_file.write_text(json.dumps(reporters_config), encoding="utf-8")
    return config_file
