"""Tests for operations.py — handler call shapes and result payloads.

Handlers receive already-validated args; validation is covered in
test_catalog.py and test_dispatcher.py.
"""

from trello_mcp import operations
from trello_mcp.exceptions import ClosedResource


class TestListBoards:
    async def test_filters_closed_and_keeps_order(self, fake_trello):
        fake_trello.routes[("GET", "/members/me/boards")] = [
            {"id": "B3", "name": "Zeta", "closed": False},
            {"id": "B1", "name": "Alpha", "closed": True},
            {"id": "B2", "name": "Beta", "closed": False},
        ]
        env = await operations.list_boards(fake_trello, {})
        assert not env.is_error
        assert env.payload == [
            {"id": "B3", "name": "Zeta", "description": "Trello board: Zeta"},
            {"id": "B2", "name": "Beta", "description": "Trello board: Beta"},
        ]
        assert fake_trello.calls == [("GET", "/members/me/boards", {"fields": "id,name,closed"})]

    async def test_empty(self, fake_trello):
        fake_trello.routes[("GET", "/members/me/boards")] = []
        env = await operations.list_boards(fake_trello, {})
        assert env.payload == []


class TestReadBoard:
    async def test_snapshot_skips_closed_lists_and_cards(self, board_trello):
        env = await operations.read_board(board_trello, {"boardId": "B1"})
        assert not env.is_error
        snapshot = env.payload
        assert snapshot["boardId"] == "B1"
        assert snapshot["boardName"] == "Roadmap"
        assert [lst["listId"] for lst in snapshot["lists"]] == ["L1", "L3"]
        assert snapshot["lists"][0]["cards"] == [
            {"id": "C1", "name": "Write docs", "description": "Trello card: Write docs in list Todo"}
        ]
        assert [c["id"] for c in snapshot["lists"][1]["cards"]] == ["C3"]
        assert "/lists/L2/cards" not in board_trello.paths()

    async def test_closed_board_short_circuits(self, fake_trello):
        fake_trello.routes[("GET", "/boards/B9")] = {"id": "B9", "name": "Old", "closed": True}
        env = await operations.read_board(fake_trello, {"boardId": "B9"})
        assert env.is_error
        assert env.error_type == ClosedResource.error_type
        assert env.payload == "Board B9 is closed"
        assert fake_trello.paths() == ["/boards/B9"]

    async def test_board_without_open_lists(self, fake_trello):
        fake_trello.routes[("GET", "/boards/B2")] = {"id": "B2", "name": "Empty", "closed": False}
        fake_trello.routes[("GET", "/boards/B2/lists")] = [{"id": "L9", "name": "x", "closed": True}]
        env = await operations.read_board(fake_trello, {"boardId": "B2"})
        assert env.payload == {"boardId": "B2", "boardName": "Empty", "lists": []}


class TestCreate:
    async def test_create_list(self, fake_trello):
        fake_trello.routes[("POST", "/lists")] = {"id": "L5", "name": "Backlog", "idBoard": "B1", "pos": 3}
        env = await operations.create_list(fake_trello, {"boardId": "B1", "name": "Backlog"})
        assert env.payload == {"id": "L5", "name": "Backlog", "boardId": "B1"}
        assert fake_trello.calls == [("POST", "/lists", {"idBoard": "B1", "name": "Backlog"})]

    async def test_create_card_default_desc(self, fake_trello):
        fake_trello.routes[("POST", "/cards")] = {
            "id": "C9",
            "url": "https://trello.com/c/abc",
            "name": "Task",
            "badges": {},
        }
        env = await operations.create_card(fake_trello, {"listId": "L1", "name": "Task"})
        assert env.payload == {"id": "C9", "url": "https://trello.com/c/abc", "name": "Task"}
        assert fake_trello.calls[0][2] == {"idList": "L1", "name": "Task", "desc": ""}

    async def test_create_card_with_desc(self, fake_trello):
        fake_trello.routes[("POST", "/cards")] = {"id": "C9", "url": None, "name": "Task"}
        await operations.create_card(fake_trello, {"listId": "L1", "name": "Task", "desc": "details"})
        assert fake_trello.calls[0][2]["desc"] == "details"


class TestUpdates:
    async def test_move_card(self, fake_trello):
        fake_trello.routes[("PUT", "/cards/C1")] = {"id": "C1", "idList": "L3"}
        env = await operations.move_card(fake_trello, {"cardId": "C1", "listId": "L3"})
        assert env.payload == {"moved": True, "cardId": "C1", "listId": "L3"}
        assert fake_trello.calls == [("PUT", "/cards/C1", {"idList": "L3"})]

    async def test_add_comment(self, fake_trello):
        fake_trello.routes[("POST", "/cards/C1/actions/comments")] = {
            "id": "A1",
            "data": {"text": "Looks good"},
        }
        env = await operations.add_comment(fake_trello, {"cardId": "C1", "text": "Looks good"})
        assert env.payload == {"commentId": "A1", "text": "Looks good"}

    async def test_add_comment_without_echo(self, fake_trello):
        fake_trello.routes[("POST", "/cards/C1/actions/comments")] = {"id": "A2"}
        env = await operations.add_comment(fake_trello, {"cardId": "C1", "text": "hi"})
        assert env.payload["text"] == "hi"

    async def test_archive_card(self, fake_trello):
        fake_trello.routes[("PUT", "/cards/C1")] = {"id": "C1", "closed": True}
        env = await operations.archive_card(fake_trello, {"cardId": "C1"})
        assert env.payload == {"archived": True, "cardId": "C1"}
        assert fake_trello.calls == [("PUT", "/cards/C1", {"closed": True})]

    async def test_archive_list(self, fake_trello):
        fake_trello.routes[("PUT", "/lists/L1")] = {"id": "L1", "closed": True}
        env = await operations.archive_list(fake_trello, {"listId": "L1"})
        assert env.payload == {"archived": True, "listId": "L1"}
        assert fake_trello.calls == [("PUT", "/lists/L1", {"closed": True})]

    async def test_delete_board_closes_it(self, fake_trello):
        fake_trello.routes[("PUT", "/boards/B1")] = {"id": "B1", "closed": True}
        env = await operations.delete_board(fake_trello, {"boardId": "B1"})
        assert env.payload == {"deleted": True, "boardId": "B1"}
        assert fake_trello.calls == [("PUT", "/boards/B1", {"closed": True})]
