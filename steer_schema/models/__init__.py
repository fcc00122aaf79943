from .schema import (
    JsonArraySchema,
    JsonBooleanSchema,
    JsonEnumSchema,
    JsonIntegerSchema,
    JsonNumberSchema,
    JsonObjectSchema,
    JsonSchemaElement,
    JsonStringSchema,
)
from .tool import ToolSpecification

__all__ = [
    "JsonSchemaElement",
    "JsonStringSchema",
    "JsonIntegerSchema",
    "JsonNumberSchema",
    "JsonBooleanSchema",
    "JsonEnumSchema",
    "JsonArraySchema",
    "JsonObjectSchema",
    "ToolSpecification",
]
