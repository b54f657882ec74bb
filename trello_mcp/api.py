"""
HTTP request layer for the Trello REST API.

TrelloClient exposes three verbs (fetch/submit/replace -> GET/POST/PUT).
Credentials are injected into every call and win over caller-supplied
params of the same name. Failures are raised, never retried.
"""

from __future__ import annotations

import time
from typing import Any

import httpx

from trello_mcp import config
from trello_mcp._utils import _sanitize_error, _sanitize_url_for_log, log_event
from trello_mcp.exceptions import RemoteServiceError
from trello_mcp.models import Credentials


def _error_envelope(message, status=None, detail=None):
    """Build a consistent, log-safe remote error message."""
    suffix = f" (status={status})" if status is not None else ""
    body = f"{message}{suffix}"
    if detail:
        body += f"\n{detail}"
    return body


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    log_event("HTTP", **fields)


class TrelloClient:
    """Minimal async Trello client: GET/POST/PUT with credential injection."""

    def __init__(
        self,
        credentials: Credentials,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.credentials = credentials
        self.base_url = (base_url or config.TRELLO_BASE_URL).rstrip("/")
        self._transport = transport

    async def fetch(self, path: str, query_params: dict | None = None) -> Any:
        return await self._request("GET", path, query_params)

    async def submit(self, path: str, body_params: dict | None = None) -> Any:
        return await self._request("POST", path, body_params)

    async def replace(self, path: str, body_params: dict | None = None) -> Any:
        return await self._request("PUT", path, body_params)

    def _params(self, params):
        merged = dict(params or {})
        merged.update(self.credentials.as_params())
        return merged

    async def _request(self, method, path, params):
        url = self.base_url + path
        _log_http_event(
            phase="request",
            method=method,
            url=_sanitize_url_for_log(str(httpx.URL(url, params=self._params(params)))),
        )
        start = time.perf_counter()
        async with httpx.AsyncClient(
            transport=self._transport, timeout=config.HTTP_TIMEOUT_SECONDS
        ) as http:
            try:
                resp = await http.request(method, url, params=self._params(params))
            except httpx.TransportError as e:
                _log_http_event(
                    phase="network_error",
                    method=method,
                    url=url,
                    error=str(e) or type(e).__name__,
                )
                raise RemoteServiceError(
                    _error_envelope(f"Connection failed: {str(e) or type(e).__name__}")
                ) from e

        safe_url = _sanitize_url_for_log(str(resp.request.url))
        _log_http_event(
            phase="response",
            method=method,
            url=safe_url,
            status=resp.status_code,
            bytes=len(resp.content),
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RemoteServiceError(
                _error_envelope(
                    f"HTTP {resp.status_code}: {resp.reason_phrase}",
                    status=resp.status_code,
                    detail=_sanitize_error(resp.text),
                ),
                code=resp.status_code,
                reason=resp.reason_phrase,
                body=_sanitize_error(resp.text),
            ) from e
        if len(resp.content) > config.HTTP_MAX_RESPONSE_BYTES:
            raise RemoteServiceError(
                f"Response too large from Trello API (>{config.HTTP_MAX_RESPONSE_BYTES} bytes)."
            )
        try:
            return resp.json()
        except ValueError:
            raise RemoteServiceError("Unexpected response from Trello API (not valid JSON).") from None
