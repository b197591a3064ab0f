"""
Request handlers for the toolbox MCP server.

One plain function per protocol method. The server module only wires these
into the MCP SDK, so everything here can be called directly.

Errors come back two ways:
- Tool problems (unknown tool, bad calculator input) raise ToolError. The SDK
  turns that into a normal call-tool result with isError set, so the agent
  sees it as part of the conversation.
- Unknown resource URIs and prompt names raise McpError(INVALID_PARAMS),
  which is sent back as a JSON-RPC error response.
"""

import json
from typing import Any, Callable, Dict, List, Mapping, Optional

import mcp.types as types
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.shared.exceptions import McpError

from toolbox_mcp.config import ResourceURI, Units
from toolbox_mcp.helpers import (
    evaluate_expression,
    get_current_system_status,
    get_weather_data,
)
from toolbox_mcp.toolbox_descriptions import (
    CALCULATION_ERROR_MESSAGE,
    CALCULATION_HELP_PROMPT,
    CALCULATION_HELP_PROMPT_DESCRIPTION,
    CALCULATION_HELP_RESULT_DESCRIPTION,
    CALCULATION_RESULT_TEMPLATE,
    CALCULATOR_DESCRIPTION,
    CALCULATOR_EXPRESSION_DESCRIPTION,
    DEFAULT_PROMPT_LOCATION,
    KNOWLEDGE_BASE_ARTICLES,
    KNOWLEDGE_BASE_DESCRIPTION,
    KNOWLEDGE_BASE_NAME,
    MISSING_EXPRESSION_MESSAGE,
    SYSTEM_STATUS_DESCRIPTION,
    SYSTEM_STATUS_NAME,
    UNKNOWN_PROMPT_MESSAGE,
    UNKNOWN_RESOURCE_MESSAGE,
    UNKNOWN_TOOL_MESSAGE,
    WEATHER_DESCRIPTION,
    WEATHER_LOCATION_DESCRIPTION,
    WEATHER_REPORT_PROMPT,
    WEATHER_REPORT_PROMPT_DESCRIPTION,
    WEATHER_REPORT_RESULT_DESCRIPTION,
    WEATHER_REPORT_TEMPLATE,
    WEATHER_UNITS_DESCRIPTION,
)

DEFAULT_WEATHER_LOCATION = "unknown"

JSON_MIME_TYPE = "application/json"


class ToolError(Exception):
    """A tool call failed in a way the calling agent should see as text."""


def _invalid_params(message: str) -> McpError:
    return McpError(types.ErrorData(code=types.INVALID_PARAMS, message=message))


def string_arg(
    arguments: Optional[Mapping[str, Any]], key: str, default: Optional[str] = None
) -> Optional[str]:
    """
    Read a string argument from an untyped argument map.

    Values of any other type (numbers, booleans, null) count as absent and
    yield the default.
    """
    if not arguments:
        return default
    value = arguments.get(key)
    return value if isinstance(value, str) else default


def _text(text: str) -> types.TextContent:
    return types.TextContent(type="text", text=text)


# ------------------------------------------------------------------
# Tools
# ------------------------------------------------------------------
TOOLS: List[types.Tool] = [
    types.Tool(
        name="weather",
        description=WEATHER_DESCRIPTION,
        inputSchema={
            "type": "object",
            "properties": {
                "location": {
                    "type": "string",
                    "description": WEATHER_LOCATION_DESCRIPTION,
                },
                "units": {
                    "type": "string",
                    "description": WEATHER_UNITS_DESCRIPTION,
                    "default": Units.METRIC,
                },
            },
            "required": ["location"],
        },
    ),
    types.Tool(
        name="calculator",
        description=CALCULATOR_DESCRIPTION,
        inputSchema={
            "type": "object",
            "properties": {
                "expression": {
                    "type": "string",
                    "description": CALCULATOR_EXPRESSION_DESCRIPTION,
                },
            },
            "required": ["expression"],
        },
    ),
]


def list_tools() -> List[types.Tool]:
    return list(TOOLS)


def _call_weather(arguments: Optional[Mapping[str, Any]]) -> List[types.TextContent]:
    location = string_arg(arguments, "location", DEFAULT_WEATHER_LOCATION)
    units = string_arg(arguments, "units", Units.METRIC)
    reading = get_weather_data(location, units)
    imperial = units == Units.IMPERIAL

    report = WEATHER_REPORT_TEMPLATE.format(
        location=location,
        temperature=reading.temperature,
        temperature_unit="°F" if imperial else "°C",
        conditions=reading.conditions,
        humidity=reading.humidity,
        wind_speed=reading.wind_speed,
        wind_unit="mph" if imperial else "km/h",
    )
    return [_text(report)]


def _call_calculator(arguments: Optional[Mapping[str, Any]]) -> List[types.TextContent]:
    expression = string_arg(arguments, "expression")
    if expression is None:
        raise ToolError(MISSING_EXPRESSION_MESSAGE)

    result = evaluate_expression(expression)
    text = CALCULATION_RESULT_TEMPLATE.format(expression=expression, result=result)
    if result == CALCULATION_ERROR_MESSAGE:
        raise ToolError(text)
    return [_text(text)]


TOOL_HANDLERS: Dict[str, Callable[[Optional[Mapping[str, Any]]], List[types.TextContent]]] = {
    "weather": _call_weather,
    "calculator": _call_calculator,
}


def call_tool(name: str, arguments: Optional[Mapping[str, Any]]) -> List[types.TextContent]:
    """Run a tool. Raises ToolError for anything the agent should see as a failed call."""
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        raise ToolError(UNKNOWN_TOOL_MESSAGE.format(name=name))
    return handler(arguments)


# ------------------------------------------------------------------
# Resources
# ------------------------------------------------------------------
RESOURCES: List[types.Resource] = [
    types.Resource(
        name=KNOWLEDGE_BASE_NAME,
        uri=ResourceURI.KNOWLEDGE_BASE,
        description=KNOWLEDGE_BASE_DESCRIPTION,
    ),
    types.Resource(
        name=SYSTEM_STATUS_NAME,
        uri=ResourceURI.SYSTEM_STATUS,
        description=SYSTEM_STATUS_DESCRIPTION,
        mimeType=JSON_MIME_TYPE,
    ),
]


def list_resources() -> List[types.Resource]:
    # Single page; there is never a next cursor.
    return list(RESOURCES)


def _read_knowledge_base() -> List[ReadResourceContents]:
    return [ReadResourceContents(content=KNOWLEDGE_BASE_ARTICLES, mime_type=None)]


def _read_system_status() -> List[ReadResourceContents]:
    status = get_current_system_status()
    document = {
        "status": status.overall,
        "components": {
            "database": status.database,
            "api": status.api,
            "model": status.model,
        },
        "lastUpdated": status.timestamp,
    }
    return [
        ReadResourceContents(
            content=json.dumps(document, indent=4, ensure_ascii=False),
            mime_type=JSON_MIME_TYPE,
        )
    ]


RESOURCE_READERS: Dict[str, Callable[[], List[ReadResourceContents]]] = {
    ResourceURI.KNOWLEDGE_BASE: _read_knowledge_base,
    ResourceURI.SYSTEM_STATUS: _read_system_status,
}


def read_resource(uri: str) -> List[ReadResourceContents]:
    reader = RESOURCE_READERS.get(uri)
    if reader is None:
        raise _invalid_params(UNKNOWN_RESOURCE_MESSAGE.format(uri=uri))
    return reader()


# ------------------------------------------------------------------
# Prompts
# ------------------------------------------------------------------
PROMPTS: List[types.Prompt] = [
    types.Prompt(
        name="weather-report",
        description=WEATHER_REPORT_PROMPT_DESCRIPTION,
        arguments=[
            types.PromptArgument(
                name="location",
                description=WEATHER_LOCATION_DESCRIPTION,
                required=False,
            ),
            types.PromptArgument(
                name="units",
                description=WEATHER_UNITS_DESCRIPTION,
                required=False,
            ),
        ],
    ),
    types.Prompt(
        name="calculation-help",
        description=CALCULATION_HELP_PROMPT_DESCRIPTION,
    ),
]


def list_prompts() -> List[types.Prompt]:
    return list(PROMPTS)


def _user_prompt(description: str, text: str) -> types.GetPromptResult:
    return types.GetPromptResult(
        description=description,
        messages=[types.PromptMessage(role="user", content=_text(text))],
    )


def _weather_report_prompt(arguments: Optional[Mapping[str, str]]) -> types.GetPromptResult:
    location = string_arg(arguments, "location", DEFAULT_PROMPT_LOCATION)
    units = string_arg(arguments, "units", Units.METRIC)
    return _user_prompt(
        WEATHER_REPORT_RESULT_DESCRIPTION,
        WEATHER_REPORT_PROMPT.format(location=location, units=units),
    )


def _calculation_help_prompt(arguments: Optional[Mapping[str, str]]) -> types.GetPromptResult:
    return _user_prompt(CALCULATION_HELP_RESULT_DESCRIPTION, CALCULATION_HELP_PROMPT)


PROMPT_BUILDERS: Dict[str, Callable[[Optional[Mapping[str, str]]], types.GetPromptResult]] = {
    "weather-report": _weather_report_prompt,
    "calculation-help": _calculation_help_prompt,
}


def get_prompt(name: str, arguments: Optional[Mapping[str, str]] = None) -> types.GetPromptResult:
    builder = PROMPT_BUILDERS.get(name)
    if builder is None:
        raise _invalid_params(UNKNOWN_PROMPT_MESSAGE.format(name=name))
    return builder(arguments)
