"""
trello-mcp shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

# Keys that may also come from the process environment (containers, CI).
KNOWN_ENV_KEYS = (
    "TRELLO_API_KEY",
    "TRELLO_TOKEN",
    "TRELLO_BASE_URL",
    "TRELLO_HTTP_HOST",
    "TRELLO_HTTP_PORT",
    "TRELLO_HTTP_TIMEOUT_SECONDS",
    "TRELLO_HTTP_MAX_RESPONSE_BYTES",
    "TRELLO_HTTP_LOG",
)


def load_env():
    """Read KEY=VALUE pairs from .env, then fill known keys from os.environ."""
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in KNOWN_ENV_KEYS:
        if key not in env and os.environ.get(key):
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default):
    """Parse float env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "1.0.0"
SERVICE_NAME = "trello-mcp-server"

DEFAULT_BASE_URL = "https://api.trello.com/1"
DEFAULT_HTTP_PORT = 3001

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env)
# ---------------------------------------------------------------------------

env = load_env()

TRELLO_API_KEY = env.get("TRELLO_API_KEY", "")
TRELLO_TOKEN = env.get("TRELLO_TOKEN", "")
TRELLO_BASE_URL = env.get("TRELLO_BASE_URL", "") or DEFAULT_BASE_URL
HTTP_HOST = env.get("TRELLO_HTTP_HOST", "") or "0.0.0.0"
HTTP_PORT = _env_int("TRELLO_HTTP_PORT", DEFAULT_HTTP_PORT)
HTTP_TIMEOUT_SECONDS = _env_float("TRELLO_HTTP_TIMEOUT_SECONDS", 30.0)
HTTP_MAX_RESPONSE_BYTES = _env_int("TRELLO_HTTP_MAX_RESPONSE_BYTES", 5_000_000)
HTTP_LOG_ENABLED = _env_bool("TRELLO_HTTP_LOG", False)

# ---------------------------------------------------------------------------
# Runtime flags (set by the CLI)
# ---------------------------------------------------------------------------

RUNTIME_QUIET = False
