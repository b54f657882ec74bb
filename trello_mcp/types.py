"""Typed response definitions for operation payloads.

These TypedDicts document the shape of dicts returned by handlers and
resource reads. They are optional — runtime behavior is unchanged (plain dicts).
"""

from __future__ import annotations

from typing import TypedDict

# ---------------------------------------------------------------------------
# Snapshot types
# ---------------------------------------------------------------------------


class CardSummary(TypedDict):
    id: str
    name: str
    description: str


class ListSnapshot(TypedDict):
    listId: str
    listName: str
    cards: list[CardSummary]


class BoardSnapshot(TypedDict):
    """Aggregated view of an open board: open lists with their open cards."""

    boardId: str
    boardName: str
    lists: list[ListSnapshot]


# ---------------------------------------------------------------------------
# Resource catalog
# ---------------------------------------------------------------------------


class BoardResource(TypedDict):
    uri: str
    name: str
    description: str
    mimeType: str


class ResourceContent(TypedDict):
    uri: str
    mimeType: str
    text: str
