"""
Rendering of schema nodes into plain dictionaries.

Output keys follow JSON-Schema vocabulary and always appear in this order:
``type``, ``description`` (when set), then the node-specific keys.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type

from ..config import SchemaSettings
from ..derivation.engine import schema_from_annotation
from ..errors import UnknownSchemaElementError
from ..models.schema import (
    JsonArraySchema,
    JsonBooleanSchema,
    JsonEnumSchema,
    JsonIntegerSchema,
    JsonNumberSchema,
    JsonObjectSchema,
    JsonSchemaElement,
    JsonStringSchema,
)


def _base(type_name: str, element: JsonSchemaElement) -> Dict[str, Any]:
    rendered: Dict[str, Any] = {"type": type_name}
    if element.description is not None:
        rendered["description"] = element.description
    return rendered


def _render_object(element: JsonObjectSchema) -> Dict[str, Any]:
    rendered = _base("object", element)
    rendered["properties"] = properties_to_map(element.properties)
    if element.required is not None:
        rendered["required"] = list(element.required)
    rendered["additionalProperties"] = element.additional_properties
    return rendered


def _render_array(element: JsonArraySchema) -> Dict[str, Any]:
    rendered = _base("array", element)
    rendered["items"] = to_map(element.items)
    return rendered


def _render_enum(element: JsonEnumSchema) -> Dict[str, Any]:
    rendered = _base("string", element)
    rendered["enum"] = list(element.enum_values)
    return rendered


_RENDERERS: Dict[Type[JsonSchemaElement], Callable[[Any], Dict[str, Any]]] = {
    JsonObjectSchema: _render_object,
    JsonArraySchema: _render_array,
    JsonEnumSchema: _render_enum,
    JsonStringSchema: lambda element: _base("string", element),
    JsonIntegerSchema: lambda element: _base("integer", element),
    JsonNumberSchema: lambda element: _base("number", element),
    JsonBooleanSchema: lambda element: _base("boolean", element),
}


def to_map(element: JsonSchemaElement) -> Dict[str, Any]:
    """Render a schema node (and its children) into a JSON-Schema dictionary.

    Raises:
        UnknownSchemaElementError: If ``element`` is not one of the known node classes
    """
    renderer = _RENDERERS.get(type(element))
    if renderer is None:
        raise UnknownSchemaElementError(f"Unknown schema element: {type(element).__name__}")
    return renderer(element)


def properties_to_map(properties: Dict[str, JsonSchemaElement]) -> Dict[str, Dict[str, Any]]:
    """Render every property node, keeping key order."""
    return {name: to_map(element) for name, element in properties.items()}


def json_schema_from(
    annotation: Any,
    description: Optional[str] = None,
    *,
    settings: Optional[SchemaSettings] = None,
) -> Dict[str, Any]:
    """Derive and render in one call."""
    return to_map(schema_from_annotation(annotation, description, settings=settings))
