"""MCP server - exposes the fetch tools over stdio."""

import logging
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ..agent.fetch_agent import FetchAgent
from ..models.request_spec import HTTP_METHODS, RESPONSE_TYPES

logger = logging.getLogger(__name__)


_HEADERS_SCHEMA = {
    "type": "object",
    "additionalProperties": {"type": "string"},
    "description": "HTTP headers",
}
_TIMEOUT_SCHEMA = {"type": "number", "description": "Request timeout in milliseconds"}

TOOL_DEFS: list[dict[str, Any]] = [
    {
        "name": "fetch-url",
        "description": "Fetch content from a URL",
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "URL to fetch"},
                "method": {
                    "type": "string",
                    "enum": list(HTTP_METHODS),
                    "default": "GET",
                    "description": "HTTP method",
                },
                "headers": _HEADERS_SCHEMA,
                "body": {"type": "string", "description": "Request body for POST/PUT/PATCH requests"},
                "timeout": _TIMEOUT_SCHEMA,
                "responseType": {
                    "type": "string",
                    "enum": list(RESPONSE_TYPES),
                    "default": "text",
                    "description": "How to parse the response",
                },
                "followRedirects": {
                    "type": "boolean",
                    "default": True,
                    "description": "Whether to follow redirects",
                },
                "fragmentSelector": {
                    "type": "string",
                    "description": "CSS selector applied when responseType is html-fragment",
                },
            },
            "required": ["url"],
        },
    },
    {
        "name": "check-status",
        "description": "Check if a URL is accessible (HEAD request)",
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "URL to check"},
                "timeout": _TIMEOUT_SCHEMA,
            },
            "required": ["url"],
        },
    },
    {
        "name": "extract-html-fragment",
        "description": "Extract the HTML of elements matching a CSS selector from a web page",
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "URL of the page"},
                "selector": {"type": "string", "description": "CSS selector of the elements to extract"},
                "anchorId": {
                    "type": "string",
                    "description": "Id of an element that must be present in the page",
                },
                "method": {
                    "type": "string",
                    "enum": ["GET", "POST"],
                    "default": "GET",
                    "description": "HTTP method",
                },
                "headers": _HEADERS_SCHEMA,
                "body": {"type": "string", "description": "Request body for POST requests"},
                "timeout": _TIMEOUT_SCHEMA,
                "followRedirects": {
                    "type": "boolean",
                    "default": True,
                    "description": "Whether to follow redirects",
                },
            },
            "required": ["url", "selector"],
        },
    },
]


class ToolCallFailed(Exception):
    """Raised inside the call handler so the SDK reports an isError result."""


def list_tool_defs() -> list[types.Tool]:
    return [
        types.Tool(name=d["name"], description=d["description"], inputSchema=d["inputSchema"])
        for d in TOOL_DEFS
    ]


def build_server(agent: FetchAgent) -> Server:
    """Wire tools/list and tools/call to the agent."""
    info = agent.config.server
    server = Server(info.name, version=info.version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return list_tool_defs()

    # Arguments are validated by the agent so errors carry the tool's own tag
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        envelope = await agent.call(name, arguments)
        if envelope.is_error:
            raise ToolCallFailed(envelope.text)
        return [types.TextContent(type="text", text=envelope.text)]

    return server


async def serve(agent: FetchAgent) -> None:
    """Run the server on stdin/stdout until the client disconnects."""
    server = build_server(agent)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP %s server started", agent.config.server.name)
        await server.run(read_stream, write_stream, server.create_initialization_options())
