# ------------------------------------------------------------------
# Tools
# ------------------------------------------------------------------
WEATHER_DESCRIPTION = "Get the current weather for the given location"

WEATHER_LOCATION_DESCRIPTION = "City name or coordinates"

WEATHER_UNITS_DESCRIPTION = "Units of measurement (metric or imperial)"

CALCULATOR_DESCRIPTION = "Perform a mathematical calculation"

CALCULATOR_EXPRESSION_DESCRIPTION = "The expression to evaluate"

# ------------------------------------------------------------------
# Tool output
# ------------------------------------------------------------------
WEATHER_REPORT_TEMPLATE = """🌤️ Weather for {location}:
Temperature: {temperature}{temperature_unit}
Conditions: {conditions}
Humidity: {humidity}%
Wind speed: {wind_speed} {wind_unit}"""

WEATHER_CONDITIONS = "Sunny"

CALCULATION_RESULT_TEMPLATE = "Result: {expression} = {result}"

CALCULATION_ERROR_MESSAGE = "Calculation error: invalid expression"

MISSING_EXPRESSION_MESSAGE = "Error: expression parameter not found"

UNKNOWN_TOOL_MESSAGE = "Error: unknown tool '{name}'"

# ------------------------------------------------------------------
# Resources
# ------------------------------------------------------------------
KNOWLEDGE_BASE_NAME = "Knowledge base articles"

KNOWLEDGE_BASE_DESCRIPTION = "A collection of support articles and documentation"

SYSTEM_STATUS_NAME = "System status"

SYSTEM_STATUS_DESCRIPTION = "Current operational status of the system"

STATUS_OK = "normal"

STATUS_RUNNING = "running"

UNKNOWN_RESOURCE_MESSAGE = "Unknown resource URI: {uri}"

KNOWLEDGE_BASE_ARTICLES = """# Knowledge Base

## Frequently Asked Questions

### Q: What does this MCP server do?
A: This server provides weather information and calculation features.

### Q: Which calculations are supported?
A: The four basic arithmetic operations (+, -, *, /) are supported.

### Q: Is the weather information real-time?
A: It currently uses mock data for demonstration purposes.

## Usage

1. `weather` tool: get weather information by specifying a location and units
2. `calculator` tool: run a calculation by specifying an expression

## Troubleshooting

- If a calculation error occurs, check the format of the expression
- Unsupported operators cannot be used
"""

# ------------------------------------------------------------------
# Prompts
# ------------------------------------------------------------------
WEATHER_REPORT_PROMPT_DESCRIPTION = "Generate a detailed weather report for the given location"

WEATHER_REPORT_RESULT_DESCRIPTION = "Detailed weather report prompt"

CALCULATION_HELP_PROMPT_DESCRIPTION = "Explain how to use the calculator"

CALCULATION_HELP_RESULT_DESCRIPTION = "Calculator help"

DEFAULT_PROMPT_LOCATION = "Tokyo"

UNKNOWN_PROMPT_MESSAGE = "Unknown prompt: {name}"

WEATHER_REPORT_PROMPT = """Please write a detailed weather report for {location}.

Include the following information:
- Current temperature and feels-like temperature
- Weather conditions
- Humidity level
- Wind conditions
- Today's weather outlook
- Clothing advice

Units to use: {units}"""

CALCULATION_HELP_PROMPT = """Please explain how to use the calculator.

Cover the following points:
- Supported operators
- How to write an expression
- Usage examples
- What to do when an error occurs"""
