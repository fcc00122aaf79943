from .mapping import (
    check_rendered_schema,
    map_tool_to_anthropic_schema,
    map_tool_to_function_schema,
    prepare_schema_for_responses_api,
)

__all__ = [
    "check_rendered_schema",
    "map_tool_to_anthropic_schema",
    "map_tool_to_function_schema",
    "prepare_schema_for_responses_api",
]
