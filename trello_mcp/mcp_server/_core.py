"""Core helpers: cached client, dispatcher and resource catalog shared by all tools."""

from __future__ import annotations

from trello_mcp.api import TrelloClient
from trello_mcp.dispatcher import Dispatcher
from trello_mcp.models import Credentials
from trello_mcp.resources import BoardResources

_client: TrelloClient | None = None
_dispatcher: Dispatcher | None = None
_resources: BoardResources | None = None


def configure(client) -> None:
    """Bind the transport to *client* (used by the CLI and tests)."""
    global _client, _dispatcher, _resources
    _client = client
    _dispatcher = Dispatcher(client)
    _resources = BoardResources(client)


def _get_client() -> TrelloClient:
    """Return a cached TrelloClient, creating one from config on first use."""
    if _client is None:
        configure(TrelloClient(Credentials.from_config()))
    return _client  # type: ignore[return-value]


def _get_dispatcher() -> Dispatcher:
    if _dispatcher is None:
        _get_client()
    return _dispatcher  # type: ignore[return-value]


def _get_resources() -> BoardResources:
    if _resources is None:
        _get_client()
    return _resources  # type: ignore[return-value]
