"""trello-mcp — MCP and HTTP/JSON-RPC access to Trello boards, lists and cards."""

from trello_mcp.api import TrelloClient
from trello_mcp.catalog import OPERATIONS, OperationCatalog, validate_arguments
from trello_mcp.config import VERSION
from trello_mcp.dispatcher import Dispatcher
from trello_mcp.exceptions import (
    ClosedResource,
    InvalidArguments,
    RemoteServiceError,
    SetupError,
    TrelloMcpError,
    UnknownOperation,
    UnsupportedResource,
)
from trello_mcp.models import Credentials, Envelope, OperationDescriptor, ParameterSpec
from trello_mcp.resources import BoardResources
from trello_mcp.types import BoardSnapshot, CardSummary, ListSnapshot

__all__ = [
    "VERSION",
    "OPERATIONS",
    "BoardResources",
    "BoardSnapshot",
    "CardSummary",
    "ClosedResource",
    "Credentials",
    "Dispatcher",
    "Envelope",
    "InvalidArguments",
    "ListSnapshot",
    "OperationCatalog",
    "OperationDescriptor",
    "ParameterSpec",
    "RemoteServiceError",
    "SetupError",
    "TrelloClient",
    "TrelloMcpError",
    "UnknownOperation",
    "UnsupportedResource",
    "validate_arguments",
]
