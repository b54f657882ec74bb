"""MCP server exposing the operation catalog and board resources over stdio.

Package structure:
  __init__.py    — Server init, register() calls, re-exports, stdio entry point
  _core.py       — Cached client/dispatcher/resources shared by handlers
  _tools.py      — tools/list, tools/call (Dispatcher-backed)
  _resources.py  — resources/list, resources/read (board:<id>)

Run: trello-mcp stdio
"""

from __future__ import annotations

import asyncio

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from trello_mcp import config
from trello_mcp.mcp_server import _resources, _tools

server = Server(config.SERVICE_NAME, version=config.VERSION)

for _mod in [_tools, _resources]:
    _mod.register(server)

from trello_mcp.mcp_server._core import configure  # noqa: E402, F401
from trello_mcp.mcp_server._resources import list_resources, read_resource  # noqa: E402, F401
from trello_mcp.mcp_server._tools import ToolCallError, call_tool, list_tools  # noqa: E402, F401


async def serve_stdio():
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    """Run the MCP server (stdio transport)."""
    asyncio.run(serve_stdio())
