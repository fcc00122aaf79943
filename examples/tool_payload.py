"""
Example: build a function-calling payload from a dataclass.

Run with:
    python examples/tool_payload.py
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, List, Optional

from steer_schema import (
    Description,
    ToolSpecification,
    map_tool_to_anthropic_schema,
    map_tool_to_function_schema,
)


class Unit(Enum):
    CELSIUS = "c"
    FAHRENHEIT = "f"


@Description("Forecast request")
@dataclass
class ForecastQuery:
    city: Annotated[str, Description("City name")]
    days: Annotated[int, Description("Number of days,", "1 to 14")]
    unit: Unit
    fields: List[str]
    country: Optional[str] = None


def main():
    logging.basicConfig(level=logging.DEBUG)

    tool = ToolSpecification.from_type(
        "get_forecast",
        "Weather forecast for a city",
        ForecastQuery,
    )

    print("OpenAI function tool:")
    print(json.dumps(map_tool_to_function_schema(tool), indent=2))

    print("\nAnthropic tool:")
    print(json.dumps(map_tool_to_anthropic_schema(tool), indent=2))


if __name__ == "__main__":
    main()
