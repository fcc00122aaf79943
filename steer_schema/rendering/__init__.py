"""Rendering of schema trees into JSON-Schema dictionaries."""

from .renderer import json_schema_from, properties_to_map, to_map

__all__ = ["to_map", "properties_to_map", "json_schema_from"]
