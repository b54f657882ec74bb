"""
Shared pure-utility functions for trello-mcp.

These helpers have no business logic. The only side effect is writing
log lines to stderr (stdout belongs to the stdio transport).
"""

import json
import re
import sys
import urllib.parse

from trello_mcp import config

_SECRET_PARAMS = {"key", "token"}


def log_event(tag, **fields):
    """Emit one structured ``[TAG] {json}`` line to stderr unless quiet."""
    if config.RUNTIME_QUIET:
        return
    print(
        f"[{tag}] " + json.dumps(fields, ensure_ascii=False, sort_keys=True, default=str),
        file=sys.stderr,
    )


def _mask_token(token):
    """Show only first 6 chars of a token for safe logging."""
    return token[:6] + "..." if len(token) > 6 else token


def _sanitize_url_for_log(url):
    """Mask credential query params in URLs before logging."""
    parsed = urllib.parse.urlsplit(url)
    if not parsed.query:
        return url
    pairs = urllib.parse.parse_qsl(parsed.query, keep_blank_values=True)
    masked = [(k, "***" if k.lower() in _SECRET_PARAMS else v) for k, v in pairs]
    safe_query = urllib.parse.urlencode(masked, doseq=True)
    return urllib.parse.urlunsplit(
        (parsed.scheme, parsed.netloc, parsed.path, safe_query, parsed.fragment)
    )


def _sanitize_error(body, max_len=500):
    """Truncate and clean error body for safe display."""
    if not body:
        return ""
    cleaned = re.sub(r"<[^>]+>", "", body)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    if len(cleaned) > max_len:
        return cleaned[:max_len] + "... [truncated]"
    return cleaned


def _is_open(item):
    """True unless Trello flagged the board/list/card as closed (archived)."""
    return isinstance(item, dict) and not item.get("closed")


def to_json_text(value):
    return json.dumps(value, indent=2, ensure_ascii=False)
