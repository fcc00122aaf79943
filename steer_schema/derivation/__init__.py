"""Schema derivation from Python types."""

from .descriptors import Description, MemberDescriptor, describe_members, type_description
from .engine import json_object_schema_from, json_schema_element_from, schema_from_annotation

__all__ = [
    "Description",
    "MemberDescriptor",
    "describe_members",
    "type_description",
    "json_schema_element_from",
    "json_object_schema_from",
    "schema_from_annotation",
]
