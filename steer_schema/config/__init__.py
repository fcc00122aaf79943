"""Configuration module for schema derivation."""

from .settings import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_UNKNOWN_TYPE_POLICY,
    MAX_DEPTH_ENV_VAR,
    UNKNOWN_TYPE_POLICY_ENV_VAR,
    SchemaSettings,
    get_default_settings,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_UNKNOWN_TYPE_POLICY",
    "MAX_DEPTH_ENV_VAR",
    "UNKNOWN_TYPE_POLICY_ENV_VAR",
    "SchemaSettings",
    "get_default_settings",
]
