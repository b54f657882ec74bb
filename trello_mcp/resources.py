"""
Board resources (``board:<id>``) and the open-list/open-card aggregation
shared with the readBoard operation.
"""

from __future__ import annotations

import asyncio

from trello_mcp._utils import _is_open, to_json_text
from trello_mcp.exceptions import ClosedResource, UnsupportedResource
from trello_mcp.types import BoardResource, BoardSnapshot, CardSummary, ListSnapshot, ResourceContent

BOARD_SCHEME = "board:"
RESOURCE_MIME_TYPE = "application/json"

_FIELDS = {"fields": "id,name,closed"}


async def fetch_open_boards(client) -> list[dict]:
    boards = await client.fetch("/members/me/boards", dict(_FIELDS))
    return [b for b in boards or [] if _is_open(b)]


async def fetch_board(client, board_id) -> dict:
    board = await client.fetch(f"/boards/{board_id}", dict(_FIELDS))
    if isinstance(board, dict):
        board.setdefault("id", board_id)
    return board


def board_description(board) -> str:
    return f"Trello board: {board.get('name')}"


def _card_summary(card, list_name) -> CardSummary:
    return {
        "id": card.get("id"),
        "name": card.get("name"),
        "description": f"Trello card: {card.get('name')} in list {list_name}",
    }


async def _list_snapshot(client, trello_list) -> ListSnapshot:
    cards = await client.fetch(f"/lists/{trello_list['id']}/cards", dict(_FIELDS))
    return {
        "listId": trello_list["id"],
        "listName": trello_list.get("name"),
        "cards": [_card_summary(c, trello_list.get("name")) for c in cards or [] if _is_open(c)],
    }


async def assemble_snapshot(client, board) -> BoardSnapshot:
    """Build the snapshot of an already-fetched, open board.

    Card fetches for all open lists run concurrently; gather() keeps the
    results in the remote list order regardless of completion order.
    """
    lists = await client.fetch(f"/boards/{board['id']}/lists", dict(_FIELDS))
    open_lists = [lst for lst in lists or [] if _is_open(lst)]
    snapshots = await asyncio.gather(*(_list_snapshot(client, lst) for lst in open_lists))
    return {
        "boardId": board["id"],
        "boardName": board.get("name"),
        "lists": list(snapshots),
    }


def parse_board_uri(uri) -> str:
    """Return the board id of a ``board:<id>`` URI or raise UnsupportedResource."""
    uri = str(uri)
    if not uri.startswith(BOARD_SCHEME):
        raise UnsupportedResource(f"Only board resources are supported, got: {uri!r}")
    board_id = uri.split(":", 1)[1]
    if not board_id:
        raise UnsupportedResource(f"Board resource URI has no board id: {uri!r}")
    return board_id


class BoardResources:
    """Read-only resource view over the open boards of the Trello member."""

    def __init__(self, client):
        self.client = client

    async def list(self) -> list[BoardResource]:
        return [
            {
                "uri": f"{BOARD_SCHEME}{b['id']}",
                "name": b.get("name"),
                "description": board_description(b),
                "mimeType": RESOURCE_MIME_TYPE,
            }
            for b in await fetch_open_boards(self.client)
        ]

    async def read(self, uri) -> ResourceContent:
        board_id = parse_board_uri(uri)
        board = await fetch_board(self.client, board_id)
        if not _is_open(board):
            raise ClosedResource(f"Board {board_id} is closed")
        snapshot = await assemble_snapshot(self.client, board)
        return {"uri": str(uri), "mimeType": RESOURCE_MIME_TYPE, "text": to_json_text(snapshot)}
