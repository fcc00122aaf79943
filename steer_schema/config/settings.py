"""
Derivation settings.

Defaults can be overridden through environment variables. A ``.env`` file
found from the current working directory upwards is loaded into
``os.environ`` first (existing variables win):

    STEER_SCHEMA_MAX_DEPTH=16
    STEER_SCHEMA_UNKNOWN_TYPE_POLICY=error
"""

import logging
import os
from functools import lru_cache
from typing import Literal

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

MAX_DEPTH_ENV_VAR = "STEER_SCHEMA_MAX_DEPTH"
UNKNOWN_TYPE_POLICY_ENV_VAR = "STEER_SCHEMA_UNKNOWN_TYPE_POLICY"

DEFAULT_MAX_DEPTH = 32
DEFAULT_UNKNOWN_TYPE_POLICY = "string"

UnknownTypePolicy = Literal["string", "error"]


class SchemaSettings(BaseModel):
    """Knobs for the derivation engine."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        description="Maximum nesting depth before derivation gives up"
    )
    unknown_type_policy: UnknownTypePolicy = Field(
        default=DEFAULT_UNKNOWN_TYPE_POLICY,
        description="'string' substitutes a string placeholder, 'error' raises"
    )

    @classmethod
    def from_env(cls) -> "SchemaSettings":
        """Build settings from environment variables, falling back to defaults."""
        load_dotenv(find_dotenv(usecwd=True))

        max_depth = DEFAULT_MAX_DEPTH
        raw_depth = os.getenv(MAX_DEPTH_ENV_VAR)
        if raw_depth:
            try:
                max_depth = max(int(raw_depth), 1)
            except ValueError:
                logger.warning(
                    "Ignoring invalid %s=%r, using %d", MAX_DEPTH_ENV_VAR, raw_depth, DEFAULT_MAX_DEPTH
                )

        policy = os.getenv(UNKNOWN_TYPE_POLICY_ENV_VAR, DEFAULT_UNKNOWN_TYPE_POLICY).strip().lower()
        if policy not in ("string", "error"):
            logger.warning(
                "Ignoring invalid %s=%r, using %r",
                UNKNOWN_TYPE_POLICY_ENV_VAR, policy, DEFAULT_UNKNOWN_TYPE_POLICY
            )
            policy = DEFAULT_UNKNOWN_TYPE_POLICY

        return cls(max_depth=max_depth, unknown_type_policy=policy)


@lru_cache(maxsize=1)
def get_default_settings() -> SchemaSettings:
    """Settings used when a caller does not pass any (cached after first read)."""
    return SchemaSettings.from_env()
