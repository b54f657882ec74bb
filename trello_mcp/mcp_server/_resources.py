"""Resource handlers: board:<id> listing and snapshot reads."""

from __future__ import annotations

from typing import Any

from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import Resource

from trello_mcp.mcp_server._core import _get_resources


async def list_resources() -> list[Resource]:
    return [
        Resource(
            uri=r["uri"],  # type: ignore[arg-type]
            name=r["name"] or r["uri"],
            description=r["description"],
            mimeType=r["mimeType"],
        )
        for r in await _get_resources().list()
    ]


async def read_resource(uri: Any) -> list[ReadResourceContents]:
    content = await _get_resources().read(str(uri))
    return [ReadResourceContents(content=content["text"], mime_type=content["mimeType"])]


def register(server):
    """Register resource handlers with the low-level MCP server."""
    server.list_resources()(list_resources)
    server.read_resource()(read_resource)
