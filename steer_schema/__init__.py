"""
Steer Schema - JSON schemas for LLM tool calls, derived from Python types.

Derive a schema tree from a dataclass, pydantic model, enum or ``typing``
annotation, then render it into an ordered dictionary ready to embed in a
tool/function-call payload:

    from steer_schema import Description, json_schema_from

    @dataclass
    class WeatherQuery:
        city: Annotated[str, Description("City name")]
        days: int

    json_schema_from(WeatherQuery)
"""

__version__ = "0.1.0"

from .config import SchemaSettings, get_default_settings
from .derivation import (
    Description,
    describe_members,
    json_object_schema_from,
    json_schema_element_from,
    schema_from_annotation,
)
from .errors import SchemaDepthError, SchemaError, UnknownSchemaElementError, UnsupportedTypeError
from .integrations import (
    check_rendered_schema,
    map_tool_to_anthropic_schema,
    map_tool_to_function_schema,
    prepare_schema_for_responses_api,
)
from .models import (
    JsonArraySchema,
    JsonBooleanSchema,
    JsonEnumSchema,
    JsonIntegerSchema,
    JsonNumberSchema,
    JsonObjectSchema,
    JsonSchemaElement,
    JsonStringSchema,
    ToolSpecification,
)
from .rendering import json_schema_from, properties_to_map, to_map

__all__ = [
    # Derivation
    "Description",
    "describe_members",
    "json_schema_element_from",
    "json_object_schema_from",
    "schema_from_annotation",

    # Rendering
    "to_map",
    "properties_to_map",
    "json_schema_from",

    # Models
    "JsonSchemaElement",
    "JsonStringSchema",
    "JsonIntegerSchema",
    "JsonNumberSchema",
    "JsonBooleanSchema",
    "JsonEnumSchema",
    "JsonArraySchema",
    "JsonObjectSchema",
    "ToolSpecification",

    # Tool payloads
    "map_tool_to_function_schema",
    "map_tool_to_anthropic_schema",
    "prepare_schema_for_responses_api",
    "check_rendered_schema",

    # Configuration
    "SchemaSettings",
    "get_default_settings",

    # Errors
    "SchemaError",
    "UnknownSchemaElementError",
    "UnsupportedTypeError",
    "SchemaDepthError",
]
