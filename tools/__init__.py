# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP host and the core
#   business logic.  mcp_server.py:
#     1. Declares each tool's parameters and docstring (the client reads
#        these to decide how to call it)
#     2. Calls the matching core/ function
#     3. Converts core ContentBlocks into MCP TextContent
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate or reshape parameters (core/ does)
#   - They do NOT talk to the registration service directly
#   - They do NOT handle authorization (the host's OAuth gate does)
# =============================================================================
