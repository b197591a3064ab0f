"""
Toolbox MCP Server.

Exposes mock weather and arithmetic tools, two readable resources and two
prompt templates to an LLM via the MCP protocol over stdio.

Tools:
- weather: Mock current weather for a location (metric or imperial)
- calculator: Evaluate a single two-operand expression

Resources:
- resource://knowledge-base/articles: Usage and troubleshooting notes
- resource://system/status: JSON status snapshot with a timestamp

Prompts:
- weather-report: Ask for a detailed weather report (location, units)
- calculation-help: Ask for an explanation of the calculator

RUN DIRECTLY:
    python -m toolbox_mcp.server
"""

import asyncio
import sys
from typing import Any, Dict, List, Optional

import mcp.server.stdio
import mcp.types as types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from pydantic import AnyUrl

from toolbox_mcp import config, handlers

# ── Create the MCP server ──────────────────────────────────────────────
server = Server(config.SERVER_NAME, version=config.SERVER_VERSION)


def _trace(message: str) -> None:
    # stdout carries JSON-RPC, so diagnostics always go to stderr
    if config.DEBUG:
        print(f"[DEBUG] {message}", file=sys.stderr)


# ── Tools ──────────────────────────────────────────────────────────────
@server.list_tools()
async def handle_list_tools() -> List[types.Tool]:
    _trace("tools/list")
    return handlers.list_tools()


# Input validation is off so that a missing argument reaches the handler
# and is reported with the tool's own message.
@server.call_tool(validate_input=False)
async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
    _trace(f"tools/call {name} {arguments}")
    return handlers.call_tool(name, arguments)


# ── Resources ──────────────────────────────────────────────────────────
@server.list_resources()
async def handle_list_resources() -> List[types.Resource]:
    _trace("resources/list")
    return handlers.list_resources()


@server.read_resource()
async def handle_read_resource(uri: AnyUrl) -> List[ReadResourceContents]:
    _trace(f"resources/read {uri}")
    return handlers.read_resource(str(uri))


# ── Prompts ────────────────────────────────────────────────────────────
@server.list_prompts()
async def handle_list_prompts() -> List[types.Prompt]:
    _trace("prompts/list")
    return handlers.list_prompts()


@server.get_prompt()
async def handle_get_prompt(name: str, arguments: Optional[Dict[str, str]]) -> types.GetPromptResult:
    _trace(f"prompts/get {name} {arguments}")
    return handlers.get_prompt(name, arguments)


# Capabilities are derived from the handlers registered above and stay
# fixed for the lifetime of the process.
INITIALIZATION_OPTIONS = server.create_initialization_options(
    notification_options=NotificationOptions(prompts_changed=True, tools_changed=True),
    experimental_capabilities={},
)


# ── Entry point ────────────────────────────────────────────────────────
async def run() -> None:
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, INITIALIZATION_OPTIONS)


def main() -> None:
    print(
        f"[INFO] Starting {config.SERVER_NAME} {config.SERVER_VERSION} on stdio...",
        file=sys.stderr,
    )
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        print("[INFO] Shutting down", file=sys.stderr)


if __name__ == "__main__":
    main()
