# =============================================================================
# main.py  -  Entry Point for the Exam Registration MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (REGISTER_API_URL, REGISTER_API_TOKEN, ...)
#   2. Builds a RegistrationConfig from the environment (core/config.py)
#   3. Creates the FastMCP server with all tools (tools/mcp_server.py)
#   4. Serves it on the transport named by MCP_TRANSPORT
#
# TRANSPORTS:
#   stdio  (default) - the MCP client starts this process and talks over
#                      stdin/stdout
#   sse              - HTTP server with the SSE endpoint at /sse
#   http             - streamable-HTTP endpoint
#
#   For sse/http, MCP_HOST and MCP_PORT choose the bind address.  The OAuth
#   authorize/token/register endpoints are served by the proxy in front of
#   this process; only authorized sessions reach the tools.
# =============================================================================

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables from .env file BEFORE reading the config.
load_dotenv()

from core.config import load_config
from core.errors import ConfigurationError
from tools.mcp_server import create_server

_TRANSPORTS = {
    "stdio": "stdio",
    "sse": "sse",
    "http": "streamable-http",
}


def main() -> None:
    """Read configuration and serve the MCP tools until interrupted."""
    try:
        config = load_config()
    except ConfigurationError as exc:
        logging.error(f"Cannot start: {exc}")
        sys.exit(1)

    transport = os.environ.get("MCP_TRANSPORT", "stdio").strip().lower()
    if transport not in _TRANSPORTS:
        logging.error(f"Unknown MCP_TRANSPORT {transport!r}; use one of {sorted(_TRANSPORTS)}")
        sys.exit(1)

    mcp = create_server(config)
    logging.info(f"Serving {mcp.name} over {transport} → {config.endpoint_url}")

    if transport == "stdio":
        mcp.run()
    else:
        mcp.run(
            transport=_TRANSPORTS[transport],
            host=os.environ.get("MCP_HOST", "127.0.0.1"),
            port=int(os.environ.get("MCP_PORT", "8000")),
        )


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
