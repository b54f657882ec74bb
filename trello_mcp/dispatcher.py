"""Dispatcher: operation name -> handler, with every outcome wrapped in an Envelope."""

from __future__ import annotations

from trello_mcp._utils import log_event
from trello_mcp.catalog import OPERATIONS, OperationCatalog, validate_arguments
from trello_mcp.exceptions import TrelloMcpError, UnknownOperation
from trello_mcp.models import Envelope
from trello_mcp.operations import HANDLERS


class Dispatcher:
    """Route invocations to handlers. ``invoke`` never raises."""

    def __init__(self, client, catalog: OperationCatalog = OPERATIONS, handlers=None):
        self.client = client
        self.catalog = catalog
        self.handlers = HANDLERS if handlers is None else handlers

    def operations(self) -> OperationCatalog:
        return self.catalog

    async def invoke(self, name, arguments=None) -> Envelope:
        envelope = await self._invoke(name, arguments)
        if envelope.is_error:
            log_event("DISPATCH", operation=name, type=envelope.error_type, error=envelope.payload)
        return envelope

    async def _invoke(self, name, arguments):
        descriptor = self.catalog.get(name) if isinstance(name, str) else None
        if descriptor is None:
            return Envelope.failure(UnknownOperation(f"Unknown operation: {name}"))
        handler = self.handlers.get(name)
        if handler is None:
            return Envelope.failure(UnknownOperation(f'Tool "{name}" is not implemented'))

        args, problem = validate_arguments(descriptor, arguments)
        if problem is not None:
            return Envelope.failure(problem)

        try:
            result = await handler(self.client, args)
        except TrelloMcpError as e:
            return Envelope.failure(e)
        except Exception as e:
            return Envelope.failure(f"Unexpected error: {e}")
        if not isinstance(result, Envelope):
            return Envelope.success(result)
        return result
