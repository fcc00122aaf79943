"""
Derivation of schema trees from Python types.

``json_schema_element_from`` classifies a class and recurses into element and
member types; ``json_object_schema_from`` handles structured classes.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..config import SchemaSettings, get_default_settings
from ..errors import SchemaDepthError, UnsupportedTypeError
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
from ..observability.logging import SchemaLogger
from .descriptors import describe_members, split_annotation, type_description
from .type_kinds import (
    homogeneous_tuple_element,
    is_collection,
    is_enum,
    is_fixed_array,
    is_json_boolean,
    is_json_integer,
    is_json_number,
    is_json_string,
    is_mapping,
    single_type_argument,
)

logger = SchemaLogger("derivation")


def _type_name(cls: Any) -> str:
    return getattr(cls, "__qualname__", None) or repr(cls)


def json_schema_element_from(
    cls: Any,
    generic_type: Any = None,
    description: Optional[str] = None,
    *,
    settings: Optional[SchemaSettings] = None,
) -> JsonSchemaElement:
    """Derive the schema node for ``cls``.

    Args:
        cls: Runtime class to describe (e.g. ``str``, ``list``, a dataclass)
        generic_type: Full annotation carrying type arguments (e.g. ``List[int]``);
            only consulted for tuples and collections
        description: Explicit description, wins over one declared on the type

    Returns:
        The derived schema node

    Raises:
        UnsupportedTypeError: If the type cannot be classified and the
            unknown-type policy is ``"error"``
        SchemaDepthError: If nesting exceeds ``settings.max_depth``
    """
    settings = settings or get_default_settings()
    return _derive(cls, generic_type, description, settings, depth=0)


def json_object_schema_from(
    cls: Any,
    description: Optional[str] = None,
    *,
    settings: Optional[SchemaSettings] = None,
) -> JsonObjectSchema:
    """Derive a closed object node from the own annotated members of ``cls``."""
    settings = settings or get_default_settings()
    return _derive_object(cls, description, settings, depth=0)


def schema_from_annotation(
    annotation: Any,
    description: Optional[str] = None,
    *,
    settings: Optional[SchemaSettings] = None,
) -> JsonSchemaElement:
    """Derive from a bare annotation such as ``List[Person]`` or ``Annotated[str, ...]``."""
    cls, generic_type, marker = split_annotation(annotation)
    if description is None and marker is not None:
        description = marker.text
    return json_schema_element_from(cls, generic_type, description, settings=settings)


def _derive(
    cls: Any,
    generic_type: Any,
    description: Optional[str],
    settings: SchemaSettings,
    depth: int,
) -> JsonSchemaElement:
    if depth > settings.max_depth:
        error = SchemaDepthError(
            f"Schema nesting exceeds max_depth={settings.max_depth} at {_type_name(cls)}; "
            "is the type self-referential?"
        )
        logger.error("Derivation aborted", type_name=_type_name(cls), depth=depth, error=error)
        raise error

    if is_json_string(cls):
        return JsonStringSchema(description=description)

    if is_json_integer(cls):
        return JsonIntegerSchema(description=description)

    if is_json_number(cls):
        return JsonNumberSchema(description=description)

    if is_json_boolean(cls):
        return JsonBooleanSchema(description=description)

    if is_enum(cls):
        return JsonEnumSchema.from_enum(
            cls, description=description if description is not None else type_description(cls)
        )

    if is_fixed_array(cls):
        element = homogeneous_tuple_element(generic_type)
        return JsonArraySchema(
            items=_derive_element(element, generic_type or cls, settings, depth),
            description=description,
        )

    if is_collection(cls):
        element = single_type_argument(generic_type)
        return JsonArraySchema(
            items=_derive_element(element, generic_type or cls, settings, depth),
            description=description,
        )

    if is_mapping(cls):
        return _unknown(generic_type or cls, description, settings, reason="no single element type")

    if cls is Any or cls is type(None) or not isinstance(cls, type):
        return _unknown(cls, description, settings)

    return _derive_object(cls, description, settings, depth)


def _derive_element(
    element: Any,
    container: Any,
    settings: SchemaSettings,
    depth: int,
) -> JsonSchemaElement:
    if element is None:
        return _unknown(container, None, settings, reason="no single element type")
    element_cls, element_type, _ = split_annotation(element)
    return _derive(element_cls, element_type, None, settings, depth + 1)


def _derive_object(
    cls: Any,
    description: Optional[str],
    settings: SchemaSettings,
    depth: int,
) -> JsonObjectSchema:
    members = describe_members(cls)
    logger.debug("Deriving object schema", type_name=_type_name(cls), members=len(members), depth=depth)

    properties: Dict[str, JsonSchemaElement] = {}
    for member in members:
        properties[member.name] = _derive(
            member.cls, member.generic_type, member.description, settings, depth + 1
        )

    return JsonObjectSchema(
        description=description if description is not None else type_description(cls),
        properties=properties,
        required=list(properties),
        additional_properties=False,
    )


def _unknown(
    subject: Any,
    description: Optional[str],
    settings: SchemaSettings,
    reason: str = "unclassifiable type",
) -> JsonSchemaElement:
    if settings.unknown_type_policy == "error":
        raise UnsupportedTypeError(f"Cannot derive a schema for {subject!r}: {reason}")
    logger.warning(
        "Falling back to string schema", type_name=_type_name(subject), reason=reason
    )
    return JsonStringSchema(description=description)
