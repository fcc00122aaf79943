"""Tool specification model for function-calling payloads."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolSpecification(BaseModel):
    """Name, description and parameter schema of a tool exposed to an LLM."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Tool name")
    description: str = Field(..., description="Tool description for LLM")
    parameters: Dict[str, Any] = Field(default_factory=dict, description="JSON schema for parameters")

    @classmethod
    def from_type(
        cls,
        name: str,
        description: str,
        parameters_type: type,
        parameters_description: Optional[str] = None,
    ) -> "ToolSpecification":
        """Build a specification whose parameters are derived from ``parameters_type``."""
        from ..derivation.engine import json_object_schema_from
        from ..rendering.renderer import to_map

        schema = json_object_schema_from(parameters_type, parameters_description)
        return cls(name=name, description=description, parameters=to_map(schema))
