"""
Schema node models.

A derived schema is a tree of frozen nodes. The set of node classes below is
closed: the renderer knows how to emit each of them and rejects anything else.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class JsonSchemaElement(BaseModel):
    """Base class for every schema node."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    description: Optional[str] = Field(None, description="Human-readable description")


class JsonStringSchema(JsonSchemaElement):
    pass


class JsonIntegerSchema(JsonSchemaElement):
    pass


class JsonNumberSchema(JsonSchemaElement):
    pass


class JsonBooleanSchema(JsonSchemaElement):
    pass


class JsonEnumSchema(JsonSchemaElement):
    enum_values: Tuple[str, ...] = Field(..., description="Constant names in declaration order")

    @classmethod
    def from_enum(cls, enum_type: Type[Enum], description: Optional[str] = None) -> "JsonEnumSchema":
        """Build an enum node from the member names of ``enum_type``."""
        return cls(enum_values=tuple(member.name for member in enum_type), description=description)


class JsonArraySchema(JsonSchemaElement):
    items: JsonSchemaElement = Field(..., description="Schema of every element")


class JsonObjectSchema(JsonSchemaElement):
    """Closed object node.

    ``properties`` is stored as a read-only mapping and ``required`` as a tuple.
    ``required`` defaults to every property name, in property order. Passing
    ``required=None`` explicitly leaves it out of the rendered output.
    """

    properties: Mapping[str, JsonSchemaElement] = Field(default_factory=dict, validate_default=True)
    required: Optional[Tuple[str, ...]] = None
    additional_properties: bool = False

    @model_validator(mode="before")
    @classmethod
    def _default_required(cls, data: Any) -> Any:
        if isinstance(data, dict) and "required" not in data:
            data = dict(data)
            data["required"] = list(data.get("properties") or {})
        return data

    @field_validator("properties")
    @classmethod
    def _read_only_properties(cls, v: Mapping[str, JsonSchemaElement]) -> Mapping[str, JsonSchemaElement]:
        return MappingProxyType(dict(v))

    @field_validator("additional_properties")
    @classmethod
    def _closed_only(cls, v: bool) -> bool:
        if v:
            raise ValueError("only closed objects (additional_properties=False) are supported")
        return v

    @model_validator(mode="after")
    def _required_subset(self) -> "JsonObjectSchema":
        if self.required is not None:
            unknown = [name for name in self.required if name not in self.properties]
            if unknown:
                raise ValueError(f"required names not in properties: {unknown}")
        return self
