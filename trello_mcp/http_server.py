"""
HTTP transport: JSON-RPC 2.0 on POST /mcp plus convenience routes.

Endpoints:
  GET  /health            -> {status, service, version, timestamp}
  POST /mcp               -> JSON-RPC 2.0 (tools/list, tools/call)
  POST /tools/{toolName}  -> body is the raw arguments object

Both /mcp and /tools delegate to the same Dispatcher as the stdio server.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from trello_mcp import config
from trello_mcp._utils import log_event
from trello_mcp.dispatcher import Dispatcher

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

AVAILABLE_ENDPOINTS = ["GET /health", "POST /mcp", "POST /tools/:toolName"]
_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _rpc_error(request_id, code, message, status_code, data=None):
    error = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return JSONResponse(
        {"jsonrpc": "2.0", "id": request_id, "error": error}, status_code=status_code
    )


async def _read_json(request: Request, empty=None):
    """Decode the request body; an empty body yields *empty*. Raises ValueError."""
    raw = await request.body()
    if not raw.strip():
        return empty
    return json.loads(raw)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Write ``[ACCESS] <iso-time> - METHOD path`` to stderr per request."""

    async def dispatch(self, request, call_next):
        if not config.RUNTIME_QUIET:
            stamp = datetime.now(timezone.utc).isoformat()
            print(f"[ACCESS] {stamp} - {request.method} {request.url.path}", file=sys.stderr)
        return await call_next(request)


def create_app(dispatcher: Dispatcher) -> Starlette:
    """Build the Starlette app around *dispatcher*."""

    async def health(request):
        return JSONResponse(
            {
                "status": "ok",
                "service": config.SERVICE_NAME,
                "version": config.VERSION,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    async def mcp_endpoint(request):
        try:
            body = await _read_json(request)
        except ValueError as e:
            return _rpc_error(None, PARSE_ERROR, "Parse error", 400, data=str(e))
        if not isinstance(body, dict):
            return _rpc_error(None, INVALID_REQUEST, "Invalid Request - expected a JSON object", 400)

        request_id = body.get("id")
        if body.get("jsonrpc") != "2.0":
            return _rpc_error(request_id, INVALID_REQUEST, 'Invalid Request - jsonrpc must be "2.0"', 400)

        method = body.get("method")
        try:
            if method == "tools/list":
                result = {"tools": dispatcher.operations().to_list()}
            elif method == "tools/call":
                params = body.get("params")
                if params is None:
                    params = {}
                if not isinstance(params, dict):
                    return _rpc_error(request_id, INVALID_PARAMS, "Invalid params - expected an object", 400)
                envelope = await dispatcher.invoke(params.get("name"), params.get("arguments"))
                result = envelope.to_tool_result()
            else:
                return _rpc_error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}", 400)
        except Exception as e:
            log_event("HTTP_ERROR", path="/mcp", method=method, error=str(e))
            return _rpc_error(request_id, INTERNAL_ERROR, "Internal error", 500, data=str(e))
        return JSONResponse({"jsonrpc": "2.0", "id": request_id, "result": result})

    async def call_tool(request):
        tool_name = request.path_params["tool_name"]
        try:
            arguments = await _read_json(request, empty={})
        except ValueError as e:
            return JSONResponse({"success": False, "error": f"Invalid JSON body: {e}"}, status_code=400)
        envelope = await dispatcher.invoke(tool_name, arguments)
        if envelope.is_error:
            return JSONResponse({"success": False, "error": envelope.payload}, status_code=500)
        return JSONResponse({"success": True, "result": envelope.payload})

    async def not_found(request):
        return JSONResponse(
            {
                "error": "Not Found",
                "message": f"Route {request.method} {request.url.path} not found",
                "availableEndpoints": AVAILABLE_ENDPOINTS,
            },
            status_code=404,
        )

    routes = [
        Route("/health", health, methods=["GET"]),
        Route("/mcp", mcp_endpoint, methods=["POST"]),
        Route("/tools/{tool_name}", call_tool, methods=["POST"]),
        # Full match for everything else, including wrong methods on known paths.
        Route("/{path:path}", not_found, methods=_ALL_METHODS),
    ]
    return Starlette(routes=routes, middleware=[Middleware(AccessLogMiddleware)])


def serve(dispatcher: Dispatcher, host=None, port=None):
    import uvicorn

    host = host or config.HTTP_HOST
    port = port or config.HTTP_PORT
    log_event("SERVER", service=config.SERVICE_NAME, url=f"http://{host}:{port}", endpoints=AVAILABLE_ENDPOINTS)
    uvicorn.run(create_app(dispatcher), host=host, port=port, log_level="warning")
