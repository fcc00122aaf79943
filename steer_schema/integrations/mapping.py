"""Mapping of rendered schemas into provider tool payload shapes."""

from typing import Any, Dict, Optional

from jsonschema import Draft202012Validator

from ..models.tool import ToolSpecification


def _parameters(tool: ToolSpecification) -> Dict[str, Any]:
    if tool.parameters:
        return tool.parameters
    return {"type": "object", "properties": {}, "required": [], "additionalProperties": False}


def map_tool_to_function_schema(tool: ToolSpecification) -> Dict[str, Any]:
    """Convert a tool specification to OpenAI function schema format.

    Args:
        tool: Tool specification with name, description, parameters

    Returns:
        OpenAI-compatible function schema
    """
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": _parameters(tool),
        }
    }


def map_tool_to_anthropic_schema(tool: ToolSpecification) -> Dict[str, Any]:
    """Convert a tool specification to Anthropic tool format."""
    return {
        "name": tool.name,
        "description": tool.description,
        "input_schema": _parameters(tool),
    }


def prepare_schema_for_responses_api(
    json_schema: Dict[str, Any],
    name: str = "result",
    strict: Optional[bool] = None
) -> Dict[str, Any]:
    """Wrap a rendered schema as an OpenAI Responses API ``response_format``.

    Args:
        json_schema: Rendered JSON schema
        name: Schema name for Responses API
        strict: Whether to enable strict mode

    Returns:
        Responses API compatible schema configuration
    """
    schema_root = dict(json_schema)
    if strict and schema_root.get("type") == "object" and "additionalProperties" not in schema_root:
        schema_root["additionalProperties"] = False

    config = {
        "type": "json_schema",
        "json_schema": {
            "name": name,
            "schema": schema_root
        }
    }

    if strict is not None:
        config["json_schema"]["strict"] = strict

    return config


def check_rendered_schema(json_schema: Dict[str, Any]) -> Dict[str, Any]:
    """Check that ``json_schema`` is itself a well-formed Draft 2020-12 schema.

    Raises jsonschema.exceptions.SchemaError on failure.
    """
    Draft202012Validator.check_schema(json_schema)
    return json_schema
