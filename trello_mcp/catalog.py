"""
Operation catalog: the fixed, ordered set of advertised operations and the
schema-driven argument validator that runs before any handler body.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from trello_mcp.exceptions import InvalidArguments
from trello_mcp.models import OperationDescriptor, ParameterSpec


class OperationCatalog:
    """Immutable, insertion-ordered table of OperationDescriptors."""

    def __init__(self, descriptors):
        self._descriptors = tuple(descriptors)
        self._by_name = {d.name: d for d in self._descriptors}

    def __iter__(self) -> Iterator[OperationDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name) -> bool:
        return name in self._by_name

    def get(self, name) -> OperationDescriptor | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [d.name for d in self._descriptors]

    def to_list(self) -> list[dict]:
        return [d.to_dict() for d in self._descriptors]


def _id(name, what):
    return ParameterSpec(name, "string", required=True, description=f"ID of the {what}")


OPERATIONS = OperationCatalog(
    (
        OperationDescriptor("listBoards", "List all open Trello boards"),
        OperationDescriptor(
            "readBoard",
            "Read lists and cards from a specific board",
            (_id("boardId", "board to read"),),
        ),
        OperationDescriptor(
            "createList",
            "Create a new list in a specific board",
            (
                _id("boardId", "board to create the list in"),
                ParameterSpec("name", "string", required=True, description="Name of the list"),
            ),
        ),
        OperationDescriptor(
            "createCard",
            "Create a new card in a specific list",
            (
                _id("listId", "list to create the card in"),
                ParameterSpec("name", "string", required=True, description="Name of the card"),
                ParameterSpec(
                    "desc", "string", description="Description of the card (optional)", default=""
                ),
            ),
        ),
        OperationDescriptor(
            "moveCard",
            "Move a card to a different list",
            (_id("cardId", "card to move"), _id("listId", "target list")),
        ),
        OperationDescriptor(
            "addComment",
            "Add a comment to a card",
            (
                _id("cardId", "card to add a comment to"),
                ParameterSpec("text", "string", required=True, description="Comment text"),
            ),
        ),
        OperationDescriptor("archiveCard", "Archive a card", (_id("cardId", "card to archive"),)),
        OperationDescriptor("archiveList", "Archive a list", (_id("listId", "list to archive"),)),
        OperationDescriptor("deleteBoard", "Delete a board", (_id("boardId", "board to delete"),)),
    )
)


def validate_arguments(
    descriptor: OperationDescriptor, arguments: Any
) -> tuple[dict | None, InvalidArguments | None]:
    """Check *arguments* against the descriptor's schema.

    Returns ``(args, None)`` with defaults applied and unknown keys dropped,
    or ``(None, InvalidArguments)`` naming every missing/malformed field.
    Empty strings count as missing.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        return None, InvalidArguments(malformed=["arguments (expected an object)"])

    args: dict[str, Any] = {}
    missing: list[str] = []
    malformed: list[str] = []
    for param in descriptor.parameters:
        value = arguments.get(param.name)
        if value is None or value == "":
            if param.required:
                missing.append(param.name)
            elif param.default is not None:
                args[param.name] = param.default
            continue
        if not param.accepts(value):
            malformed.append(f"{param.name} (expected {param.type})")
            continue
        args[param.name] = value

    if missing or malformed:
        return None, InvalidArguments(missing=missing, malformed=malformed)
    return args, None
