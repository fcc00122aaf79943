"""Shared pytest fixtures for Steer Schema tests."""

import pytest

from steer_schema.config import (
    MAX_DEPTH_ENV_VAR,
    UNKNOWN_TYPE_POLICY_ENV_VAR,
    SchemaSettings,
    get_default_settings,
)


@pytest.fixture(autouse=True)
def clean_schema_env(monkeypatch):
    """Keep settings independent of the developer's environment."""
    monkeypatch.delenv(MAX_DEPTH_ENV_VAR, raising=False)
    monkeypatch.delenv(UNKNOWN_TYPE_POLICY_ENV_VAR, raising=False)
    monkeypatch.setattr("steer_schema.config.settings.load_dotenv", lambda *args, **kwargs: False)
    get_default_settings.cache_clear()
    yield
    get_default_settings.cache_clear()


@pytest.fixture
def default_settings():
    """Default derivation settings."""
    return SchemaSettings()


@pytest.fixture
def strict_settings():
    """Settings that raise on unclassifiable types."""
    return SchemaSettings(unknown_type_policy="error")
