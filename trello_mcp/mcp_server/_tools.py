"""Tool handlers: tools/list and tools/call backed by the Dispatcher."""

from __future__ import annotations

from typing import Any

from mcp.types import TextContent, Tool

from trello_mcp.catalog import OPERATIONS
from trello_mcp.exceptions import TrelloMcpError
from trello_mcp.mcp_server._core import _get_dispatcher


class ToolCallError(TrelloMcpError):
    """Raised so the SDK reports an ``isError`` tool result."""


async def list_tools() -> list[Tool]:
    return [Tool(**d.to_dict()) for d in OPERATIONS]


async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    envelope = await _get_dispatcher().invoke(name, arguments)
    if envelope.is_error:
        raise ToolCallError(envelope.text)
    return [TextContent(type="text", text=envelope.text)]


def register(server):
    """Register tool handlers with the low-level MCP server."""
    server.list_tools()(list_tools)
    # Arguments are validated by the dispatcher against the catalog.
    server.call_tool(validate_input=False)(call_tool)
