"""
Shared test fixtures for trello-mcp tests.
Patches config module to avoid loading a real .env and making API calls.
"""

import os
import sys

import pytest

# Add project root to path so imports work without an install
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from trello_mcp import config  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state.
    Prevents tests from reading the real .env or printing HTTP logs."""
    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "TRELLO_API_KEY", "fake-key")
    monkeypatch.setattr(config, "TRELLO_TOKEN", "fake-token")
    monkeypatch.setattr(config, "TRELLO_BASE_URL", "https://trello.test/1")
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "RUNTIME_QUIET", True)


class FakeTrello:
    """Stands in for TrelloClient: canned responses per (verb, path), records calls."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    async def _answer(self, verb, path, params):
        self.calls.append((verb, path, dict(params or {})))
        key = (verb, path)
        if key not in self.routes:
            raise AssertionError(f"unexpected call {verb} {path}")
        answer = self.routes[key]
        if isinstance(answer, Exception):
            raise answer
        return answer

    async def fetch(self, path, query_params=None):
        return await self._answer("GET", path, query_params)

    async def submit(self, path, body_params=None):
        return await self._answer("POST", path, body_params)

    async def replace(self, path, body_params=None):
        return await self._answer("PUT", path, body_params)

    def paths(self, verb=None):
        return [p for v, p, _ in self.calls if verb is None or v == verb]


@pytest.fixture
def fake_trello():
    return FakeTrello()


BOARD_ROUTES = {
    ("GET", "/boards/B1"): {"id": "B1", "name": "Roadmap", "closed": False},
    ("GET", "/boards/B1/lists"): [
        {"id": "L1", "name": "Todo", "closed": False},
        {"id": "L2", "name": "Old", "closed": True},
        {"id": "L3", "name": "Done", "closed": False},
    ],
    ("GET", "/lists/L1/cards"): [
        {"id": "C1", "name": "Write docs", "closed": False},
        {"id": "C2", "name": "Stale", "closed": True},
    ],
    ("GET", "/lists/L3/cards"): [{"id": "C3", "name": "Ship it", "closed": False}],
}


@pytest.fixture
def board_trello():
    return FakeTrello(BOARD_ROUTES)
