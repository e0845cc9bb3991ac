# =============================================================================
# core/results.py  -  Tool Result Formatting
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a Success / Failure into the content blocks an MCP tool returns.
#   This is the last step of every tool call and it never raises: failures
#   reach the caller as ordinary text, not as transport errors.
#
#   The caller can always tell the three failure kinds apart:
#     validation -> "invalid input" + one line per bad field
#     upstream   -> the HTTP status the registration service returned
#     unexpected -> the raw error message
# =============================================================================

import json
from typing import Any

from core.models import ContentBlock, Failure, FailureKind, Success, ToolResult

SUCCESS_PREFIX = "User registration successful"
FAILURE_PREFIX = "User registration failed"


def render_result(result: ToolResult) -> list[ContentBlock]:
    """Render a tool outcome as a list of text content blocks."""
    if isinstance(result, Success):
        return [ContentBlock(text=f"{SUCCESS_PREFIX}: {_to_json(result.payload)}")]
    return [ContentBlock(text=_describe_failure(result))]


def _describe_failure(failure: Failure) -> str:
    if failure.kind is FailureKind.VALIDATION:
        lines = [f"{FAILURE_PREFIX}: invalid input"]
        lines.extend(f"- {v.describe()}" for v in failure.violations)
        return "\n".join(lines)

    if failure.kind is FailureKind.UPSTREAM:
        return (
            f"{FAILURE_PREFIX}: the registration service rejected the call "
            f"({failure.message})"
        )

    return f"{FAILURE_PREFIX}: unexpected error: {failure.message}"


def _to_json(payload: Any) -> str:
    try:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(payload)


def text_result(text: str) -> list[ContentBlock]:
    """Wrap plain text as a single content block."""
    return [ContentBlock(text=text)]


def format_number(value: float) -> str:
    """Render a number the way a JSON client expects: 3.0 -> "3"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
