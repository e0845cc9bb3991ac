# =============================================================================
# core/registration_client.py  -  The Outbound Registration Call
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends ONE HTTP POST to the registration service and classifies the
#   answer:
#     2xx      -> the parsed JSON body, returned untouched
#     anything -> UpstreamCallFailed(status_code, reason); the body is not
#     else        read
#
# CREDENTIAL DELIVERY:
#   Deployments differ: some expect ?authtoken=... on the URL, others a
#   header.  RegistrationConfig says which, and under what name.
#
# WHAT THIS MODULE DOES NOT DO:
#   No retries and no custom timeout (httpx's default applies).  The call
#   is the only await in a tool invocation.
# =============================================================================

import logging
from typing import Any

import httpx

from core.config import CREDENTIAL_IN_HEADER, RegistrationConfig
from core.errors import UpstreamCallFailed
from core.models import RegistrationPayload

logger = logging.getLogger(__name__)


def build_request_kwargs(payload: RegistrationPayload, config: RegistrationConfig) -> dict[str, Any]:
    """Keyword arguments for httpx's post(): body, headers and credential."""
    headers = {"Content-Type": "application/json"}
    params: dict[str, str] = {}

    if config.credential_location == CREDENTIAL_IN_HEADER:
        headers[config.credential_name] = config.api_token
    else:
        params[config.credential_name] = config.api_token

    return {"json": payload.to_dict(), "headers": headers, "params": params}


async def submit_registration(
    payload: RegistrationPayload,
    config: RegistrationConfig,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """POST the payload to the registration service.

    Args:
        payload: The assembled request body.
        config: Endpoint and credential settings.
        client: Optional shared AsyncClient.  When omitted, a client is
            opened for this one call and closed afterwards.

    Returns:
        The decoded JSON response body.

    Raises:
        UpstreamCallFailed: If the service answers with a non-2xx status.
        httpx.HTTPError: On transport-level failures (DNS, connect, ...).
    """
    if client is None:
        async with httpx.AsyncClient() as own_client:
            return await _post(own_client, payload, config)
    return await _post(client, payload, config)


async def _post(client: httpx.AsyncClient, payload: RegistrationPayload, config: RegistrationConfig) -> Any:
    response = await client.post(config.endpoint_url, **build_request_kwargs(payload, config))

    if not response.is_success:
        logger.warning(
            "Registration service returned HTTP %s %s",
            response.status_code, response.reason_phrase,
        )
        raise UpstreamCallFailed(response.status_code, response.reason_phrase)

    return response.json()
