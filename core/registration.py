# =============================================================================
# core/registration.py  -  The register_user Pipeline
# =============================================================================
#
# HOW ONE CALL FLOWS:
#   Received -> Normalized -> Defaulted -> Validated -> AssembledPayload
#            -> CallSucceeded | CallFailed -> Formatted
#
#   Each step is a plain function from the modules next to this one.  This
#   function only strings them together and converts every exception into
#   a Failure, so the tools/ layer always gets a ToolResult back.
#
#   Invalid input stops the flow before the network call.
# =============================================================================

import logging
from typing import Any, Mapping

import httpx

from core.config import RegistrationConfig
from core.models import Failure, FailureKind, Success, ToolResult
from core.params import PARAMETER_SCHEMA, apply_defaults, extract_values
from core.payload import assemble_payload
from core.registration_client import submit_registration
from core.validation import validate_registration

logger = logging.getLogger(__name__)


async def register_user(
    raw_params: Mapping[str, Any],
    config: RegistrationConfig,
    client: httpx.AsyncClient | None = None,
) -> ToolResult:
    """Register one user with the registration service.

    Args:
        raw_params: Tool arguments as received (scalars or {"value": x}).
        config: Registration endpoint, credential and placeholder logo.
        client: Optional shared httpx.AsyncClient.

    Returns:
        Success with the service's response body, or a classified Failure.
    """
    try:
        schema = PARAMETER_SCHEMA.with_default("logo", config.default_logo_url)
        params = apply_defaults(extract_values(raw_params), schema)
        registration = validate_registration(params, schema)
        payload = assemble_payload(registration)
        logger.debug("Submitting registration for exam %s", registration.exam_id)
        response = await submit_registration(payload, config, client)
    except Exception as exc:
        failure = Failure.from_exception(exc)
        if failure.kind is FailureKind.UNEXPECTED:
            logger.exception("register_user failed unexpectedly")
        return failure

    return Success(payload=response)
