# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools this server exposes.  Each tool is a thin
#   wrapper around core/ - it logs the call, hands the arguments to the
#   core pipeline and converts the result into MCP content blocks.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (behind the OAuth gate) calls a tool by name
#   2. FastMCP routes the call to the decorated function below
#   3. The function calls core/ logic (core/registration.py)
#   4. The ToolResult is rendered to text blocks (core/results.py)
#   5. The client receives the blocks - success OR failure, never a
#      transport error
#
# TOOLS:
#   add            -> sum of two numbers (smoke test for clients)
#   register_user  -> registers an end user with the exam platform
#
# CONFIGURATION:
#   create_server() takes a RegistrationConfig explicitly.  main.py builds
#   it from the environment; tests build one by hand and inject an
#   httpx.AsyncClient with a fake transport.
# =============================================================================

import json
import logging
import sys
from dataclasses import asdict
from typing import Annotated, Any

import httpx
from fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field
from pydantic.fields import FieldInfo

# The tools layer depends on core/ and nothing else.
from core.config import RegistrationConfig
from core.models import ContentBlock
from core.params import INTEGER, PARAMETER_SCHEMA, ParameterSpec
from core.registration import register_user as run_registration
from core.results import format_number, render_result, text_result

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because, on the stdio transport, STDOUT carries the MCP
# JSON protocol.  A stray log line on stdout would corrupt the stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response JSON
#     - YELLOW for intermediate status/progress messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

SERVER_NAME = "exam-registration"

# Personal data that must not reach the logs.
_REDACTED_PARAMS = ("emailid", "contact_no")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _redact(params: dict[str, Any]) -> dict[str, Any]:
    """Mask personal parameters before logging."""
    return {k: ("***" if k in _REDACTED_PARAMS else v) for k, v in params.items()}


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, blocks: list[ContentBlock]) -> list[TextContent]:
    """Log the response blocks as compact JSON in GREEN, then convert them."""
    logged = json.dumps([asdict(b) for b in blocks], separators=(",", ":"), ensure_ascii=False)
    logging.info(f"{_GREEN}  ← {tool_name} response: {logged}{_RESET}")
    return to_mcp_content(blocks)


def to_mcp_content(blocks: list[ContentBlock]) -> list[TextContent]:
    """Convert core content blocks into MCP SDK TextContent objects."""
    return [TextContent(type="text", text=block.text) for block in blocks]


def describe_parameter(spec: ParameterSpec) -> FieldInfo:
    """Advertised JSON schema for one register_user parameter.

    The value may be sent bare or wrapped as {"value": ...}.
    """
    json_type = "integer" if spec.kind == INTEGER else "string"
    if spec.required:
        description = f"{spec.description} (required)"
    else:
        description = f"{spec.description} (default: {spec.default!r})"
    return Field(
        description=description,
        json_schema_extra={
            "anyOf": [
                {"type": json_type},
                {
                    "type": "object",
                    "properties": {"value": {"type": json_type}},
                    "required": ["value"],
                },
                {"type": "null"},
            ],
        },
    )


def create_server(
    config: RegistrationConfig,
    http_client: httpx.AsyncClient | None = None,
) -> FastMCP:
    """Create the FastMCP server and register every tool on it.

    Args:
        config: Registration endpoint, credential and placeholder logo.
        http_client: Optional shared AsyncClient for the registration call.
            When omitted, each call opens and closes its own client.
    """
    mcp = FastMCP(SERVER_NAME)

    # =========================================================================
    # TOOL 1: add
    # =========================================================================
    @mcp.tool()
    def add(a: float, b: float):
        """Add two numbers and return the sum as text.

        Args:
            a: First addend.
            b: Second addend.
        """
        _log_request("add", a=a, b=b)
        return _log_response("add", text_result(format_number(a + b)))

    # =========================================================================
    # TOOL 2: register_user
    # =========================================================================
    # Every parameter is typed Any on purpose: clients may send a plain
    # scalar or a {"value": x} wrapper, and core/params.py unwraps both.
    # Strict typing starts at core/validation.py.  The advertised schema
    # (type, description, default) comes from the parameter table.
    #
    # None means "not supplied"; core/params.py fills the default.  Required
    # fields are not listed as required in the schema: a missing one must
    # come back as a validation message, not a protocol error.
    # =========================================================================
    schema = PARAMETER_SCHEMA.with_default("logo", config.default_logo_url)

    def arg(name: str) -> FieldInfo:
        return describe_parameter(schema.get(name))

    @mcp.tool()
    async def register_user(
        username: Annotated[Any, arg("username")] = None,
        emailid: Annotated[Any, arg("emailid")] = None,
        contact_no: Annotated[Any, arg("contact_no")] = None,
        admin_id: Annotated[Any, arg("admin_id")] = None,
        organization_id: Annotated[Any, arg("organization_id")] = None,
        superadmin_id: Annotated[Any, arg("superadmin_id")] = None,
        associate_id: Annotated[Any, arg("associate_id")] = None,
        exam_id: Annotated[Any, arg("exam_id")] = None,
        set_id: Annotated[Any, arg("set_id")] = None,
        logo: Annotated[Any, arg("logo")] = None,
        name: Annotated[Any, arg("name")] = None,
        primary: Annotated[Any, arg("primary")] = None,
        background: Annotated[Any, arg("background")] = None,
        cta: Annotated[Any, arg("cta")] = None,
        cta_text_color: Annotated[Any, arg("cta_text_color")] = None,
        cta_text: Annotated[Any, arg("cta_text")] = None,
        copyright_text: Annotated[Any, arg("copyright_text")] = None,
        test_name: Annotated[Any, arg("test_name")] = None,
        backtodashboard: Annotated[Any, arg("backtodashboard")] = None,
        testlink: Annotated[Any, arg("testlink")] = None,
        reportlink: Annotated[Any, arg("reportlink")] = None,
        client_id: Annotated[Any, arg("client_id")] = None,
        client_log: Annotated[Any, arg("client_log")] = None,
    ):
        """Register a user for an exam on the assessment platform.

        WHEN TO CALL THIS: When a person should be enrolled into an exam.
        Only username, emailid and contact_no are required; everything else
        falls back to the platform defaults (admin 67, organization 76,
        exam 2, set 16, blank branding).

        Returns a text block starting with "User registration successful"
        and the service's JSON response, or "User registration failed" with
        the reason (invalid fields, HTTP status, or error message).
        """
        supplied = {
            "username": username,
            "emailid": emailid,
            "contact_no": contact_no,
            "admin_id": admin_id,
            "organization_id": organization_id,
            "superadmin_id": superadmin_id,
            "associate_id": associate_id,
            "exam_id": exam_id,
            "set_id": set_id,
            "logo": logo,
            "name": name,
            "primary": primary,
            "background": background,
            "cta": cta,
            "cta_text_color": cta_text_color,
            "cta_text": cta_text,
            "copyright_text": copyright_text,
            "test_name": test_name,
            "backtodashboard": backtodashboard,
            "testlink": testlink,
            "reportlink": reportlink,
            "client_id": client_id,
            "client_log": client_log,
        }
        raw_params = {k: v for k, v in supplied.items() if v is not None}
        _log_request("register_user", **_redact(raw_params))

        result = await run_registration(raw_params, config, http_client)
        _log_status(f"Outcome: {type(result).__name__}")
        return _log_response("register_user", render_result(result))

    return mcp
