"""
trello-mcp — serve Trello boards, lists and cards to MCP clients
"""

import argparse
import json
import sys

from trello_mcp import config, http_server, mcp_server
from trello_mcp.api import TrelloClient
from trello_mcp.catalog import OPERATIONS
from trello_mcp.dispatcher import Dispatcher
from trello_mcp.exceptions import TrelloMcpError
from trello_mcp.models import Credentials


def build_parser():
    parser = argparse.ArgumentParser(
        prog="trello-mcp",
        description="Expose Trello boards, lists and cards as MCP tools and resources.",
    )
    parser.add_argument("--key", help="Trello API key (default: TRELLO_API_KEY from .env)")
    parser.add_argument("--token", help="Trello API token (default: TRELLO_TOKEN from .env)")
    parser.add_argument("--base-url", help=f"Trello API base URL (default: {config.DEFAULT_BASE_URL})")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Suppress log output on stderr")
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Log every Trello HTTP request")
    parser.add_argument("--version", action="version", version=f"trello-mcp {config.VERSION}")

    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("stdio", help="Run the MCP server over stdin/stdout")
    p.set_defaults(func=cmd_stdio)

    p = sub.add_parser("http", help="Run the HTTP / JSON-RPC server")
    p.add_argument("--host", default=None, help=f"Bind address (default: {config.HTTP_HOST})")
    p.add_argument("--port", type=int, default=None, help=f"Port (default: {config.HTTP_PORT})")
    p.set_defaults(func=cmd_http)

    p = sub.add_parser("tools", help="Print the operation catalog as JSON")
    p.set_defaults(func=cmd_tools)
    return parser


def _client_from_args(ns):
    credentials = Credentials.from_config(key=ns.key, token=ns.token)
    return TrelloClient(credentials, base_url=ns.base_url)


def cmd_stdio(ns):
    mcp_server.configure(_client_from_args(ns))
    mcp_server.main()


def cmd_http(ns):
    http_server.serve(Dispatcher(_client_from_args(ns)), host=ns.host, port=ns.port)


def cmd_tools(ns):
    print(json.dumps(OPERATIONS.to_list(), indent=2))


def _emit_error(err):
    payload = {
        "ok": False,
        "error": {
            "type": err.error_type,
            "message": str(err),
            "exit_code": err.exit_code,
        },
    }
    print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)


def main(argv=None):
    parser = build_parser()
    ns = parser.parse_args(argv)
    config.RUNTIME_QUIET = ns.quiet
    if ns.verbose:
        config.HTTP_LOG_ENABLED = True

    handler = getattr(ns, "func", None)
    if handler is None:
        parser.print_help()
        sys.exit(0)

    try:
        handler(ns)
    except TrelloMcpError as e:
        _emit_error(e)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
