# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the registration tool server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or the MCP SDK.  The tools/ layer
#   wraps these functions in MCP tools; everything here can be driven from a
#   plain Python REPL or a pytest test with a fake HTTP transport.
#
# THE PIPELINE (one pass per tool call):
#   params.extract_values        -> unwrap {"value": x} parameters
#   params.apply_defaults        -> fill omitted optional fields
#   validation.validate_...      -> strict re-validation (pydantic)
#   payload.assemble_payload     -> nested body for the registration API
#   registration_client.submit_. -> the one outbound HTTP call (httpx)
#   results.render_result        -> content blocks for the RPC response
#
#   registration.register_user strings these together.
# =============================================================================
