"""
Operation handlers — one coroutine per catalog entry.

Each handler receives the TrelloClient and arguments already validated
against its descriptor, and returns an Envelope. Domain conditions come
back as failure envelopes; remote errors propagate as exceptions and are
normalized by the Dispatcher.
"""

from __future__ import annotations

from trello_mcp._utils import _is_open
from trello_mcp.exceptions import ClosedResource
from trello_mcp.models import Envelope
from trello_mcp.resources import assemble_snapshot, board_description, fetch_board, fetch_open_boards

# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


async def list_boards(client, args):
    boards = await fetch_open_boards(client)
    return Envelope.success(
        [{"id": b.get("id"), "name": b.get("name"), "description": board_description(b)} for b in boards]
    )


async def read_board(client, args):
    """Snapshot an open board; a closed board short-circuits before any list fetch."""
    board_id = args["boardId"]
    board = await fetch_board(client, board_id)
    if not _is_open(board):
        return Envelope.failure(ClosedResource(f"Board {board_id} is closed"))
    return Envelope.success(await assemble_snapshot(client, board))


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------


async def create_list(client, args):
    created = await client.submit("/lists", {"idBoard": args["boardId"], "name": args["name"]})
    return Envelope.success(
        {
            "id": created.get("id"),
            "name": created.get("name"),
            "boardId": created.get("idBoard", args["boardId"]),
        }
    )


async def create_card(client, args):
    card = await client.submit(
        "/cards",
        {"idList": args["listId"], "name": args["name"], "desc": args.get("desc", "")},
    )
    return Envelope.success({"id": card.get("id"), "url": card.get("url"), "name": card.get("name")})


async def move_card(client, args):
    await client.replace(f"/cards/{args['cardId']}", {"idList": args["listId"]})
    return Envelope.success({"moved": True, "cardId": args["cardId"], "listId": args["listId"]})


async def add_comment(client, args):
    comment = await client.submit(f"/cards/{args['cardId']}/actions/comments", {"text": args["text"]})
    data = comment.get("data") or {}
    return Envelope.success({"commentId": comment.get("id"), "text": data.get("text", args["text"])})


async def archive_card(client, args):
    await client.replace(f"/cards/{args['cardId']}", {"closed": True})
    return Envelope.success({"archived": True, "cardId": args["cardId"]})


async def archive_list(client, args):
    await client.replace(f"/lists/{args['listId']}", {"closed": True})
    return Envelope.success({"archived": True, "listId": args["listId"]})


async def delete_board(client, args):
    """Close the board (Trello's soft delete; the client speaks GET/POST/PUT only)."""
    await client.replace(f"/boards/{args['boardId']}", {"closed": True})
    return Envelope.success({"deleted": True, "boardId": args["boardId"]})


HANDLERS = {
    "listBoards": list_boards,
    "readBoard": read_board,
    "createList": create_list,
    "createCard": create_card,
    "moveCard": move_card,
    "addComment": add_comment,
    "archiveCard": archive_card,
    "archiveList": archive_list,
    "deleteBoard": delete_board,
}
