"""
Typed models for credentials, the operation catalog, and dispatch results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from trello_mcp import config
from trello_mcp._utils import _mask_token, to_json_text
from trello_mcp.exceptions import SetupError, TrelloMcpError

# JSON schema type name -> accepted Python types.
_JSON_TYPES: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "boolean": (bool,),
    "integer": (int,),
    "number": (int, float),
    "object": (dict,),
    "array": (list,),
}


@dataclass(frozen=True)
class Credentials:
    """Trello API key + token, shared read-only by the client."""

    key: str
    token: str

    @classmethod
    def from_config(cls, key=None, token=None):
        key = key or config.TRELLO_API_KEY
        token = token or config.TRELLO_TOKEN
        missing = [name for name, value in (("TRELLO_API_KEY", key), ("TRELLO_TOKEN", token)) if not value]
        if missing:
            raise SetupError(
                f"[SETUP_NEEDED] {', '.join(missing)} not set. "
                "Add them to .env or pass --key/--token."
            )
        return cls(key=key, token=token)

    def as_params(self) -> dict[str, str]:
        return {"key": self.key, "token": self.token}

    def __repr__(self) -> str:
        return f"Credentials(key={_mask_token(self.key)!r}, token={_mask_token(self.token)!r})"


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    type: str = "string"
    required: bool = False
    description: str = ""
    default: Any = None

    def accepts(self, value) -> bool:
        accepted = _JSON_TYPES.get(self.type)
        if accepted is None:
            return True
        if isinstance(value, bool) and bool not in accepted:
            return False
        return isinstance(value, accepted)


@dataclass(frozen=True)
class OperationDescriptor:
    """One advertised operation: name, description and parameter schema."""

    name: str
    description: str
    parameters: tuple[ParameterSpec, ...] = ()

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def input_schema(self) -> dict:
        return {
            "type": "object",
            "properties": {
                p.name: {"type": p.type, "description": p.description} for p in self.parameters
            },
            "required": self.required,
        }

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


@dataclass(frozen=True)
class Envelope:
    """Uniform success/error wrapper produced for every invocation.

    Failures carry the human-readable message as payload plus the
    ``error_type`` of the condition that produced them.
    """

    payload: Any
    is_error: bool = False
    error_type: str | None = None

    @classmethod
    def success(cls, payload) -> Envelope:
        return cls(payload=payload)

    @classmethod
    def failure(cls, error: TrelloMcpError | str, error_type: str = "error") -> Envelope:
        if isinstance(error, TrelloMcpError):
            return cls(payload=str(error), is_error=True, error_type=error.error_type)
        return cls(payload=str(error), is_error=True, error_type=error_type)

    @property
    def text(self) -> str:
        if self.is_error:
            return f"Error: {self.payload}"
        return to_json_text(self.payload)

    def to_dict(self) -> dict:
        return {"payload": self.payload, "isError": self.is_error}

    def to_tool_result(self) -> dict:
        """Render as an MCP ``tools/call`` result."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }
