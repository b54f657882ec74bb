"""
trello-mcp exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class TrelloMcpError(Exception):
    """Exit code 1 — validation, not-found, remote and parse errors."""

    exit_code = 1
    error_type = "error"


class SetupError(TrelloMcpError):
    """Exit code 2 — missing API key or token."""

    exit_code = 2
    error_type = "setup"


class InvalidArguments(TrelloMcpError):
    """Missing or malformed operation arguments."""

    error_type = "invalid_arguments"

    def __init__(self, missing=None, malformed=None):
        self.missing = list(missing or [])
        self.malformed = list(malformed or [])
        parts = []
        if self.missing:
            parts.append(f"Missing required arguments: {', '.join(self.missing)}")
        if self.malformed:
            parts.append(f"Malformed arguments: {', '.join(self.malformed)}")
        super().__init__("; ".join(parts) or "Invalid arguments")


class UnknownOperation(TrelloMcpError):
    error_type = "unknown_operation"


class UnsupportedResource(TrelloMcpError):
    error_type = "unsupported_resource"


class ClosedResource(TrelloMcpError):
    """The board is archived on the Trello side."""

    error_type = "closed_resource"


class RemoteServiceError(TrelloMcpError):
    """Raised by TrelloClient when Trello answers non-2xx or is unreachable."""

    error_type = "remote_service"

    def __init__(self, message, code=None, reason=None, body=""):
        super().__init__(message)
        self.code = code
        self.reason = reason
        self.body = body
