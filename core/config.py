# =============================================================================
# core/config.py  -  Deployment Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the registration endpoint, its credential and a few deployment
#   choices from the environment into a frozen RegistrationConfig.
#
#   The config object is passed explicitly into the pipeline and the
#   registration client.  Nothing in core/ reads os.environ at call time,
#   so tests build a RegistrationConfig by hand.
#
# ENVIRONMENT VARIABLES:
#   REGISTER_API_URL                  (required) registration endpoint
#   REGISTER_API_TOKEN                (required) credential
#   REGISTER_API_CREDENTIAL_LOCATION  "query" (default) or "header"
#   REGISTER_API_CREDENTIAL_NAME      query parameter / header name
#                                     (default "authtoken")
#   REGISTER_DEFAULT_LOGO_URL         placeholder logo used when the caller
#                                     sends none
#
# main.py loads a .env file (python-dotenv) before calling load_config().
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping

from core.errors import ConfigurationError

DEFAULT_LOGO_URL = (
    "https://tm-uat-resources.s3.ap-south-1.amazonaws.com/brand-logo/blank-logo-main.png"
)
DEFAULT_CREDENTIAL_NAME = "authtoken"

CREDENTIAL_IN_QUERY = "query"
CREDENTIAL_IN_HEADER = "header"
_CREDENTIAL_LOCATIONS = (CREDENTIAL_IN_QUERY, CREDENTIAL_IN_HEADER)


@dataclass(frozen=True)
class RegistrationConfig:
    """Where and how to call the registration service."""

    endpoint_url: str
    api_token: str
    credential_location: str = CREDENTIAL_IN_QUERY
    credential_name: str = DEFAULT_CREDENTIAL_NAME
    default_logo_url: str = DEFAULT_LOGO_URL

    def __post_init__(self) -> None:
        if self.credential_location not in _CREDENTIAL_LOCATIONS:
            raise ConfigurationError(
                f"credential_location must be one of {_CREDENTIAL_LOCATIONS}, "
                f"got {self.credential_location!r}"
            )

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks.
        return (
            f"RegistrationConfig(endpoint_url={self.endpoint_url!r}, "
            f"credential_location={self.credential_location!r}, "
            f"credential_name={self.credential_name!r})"
        )


def load_config(environ: Mapping[str, str] | None = None) -> RegistrationConfig:
    """Build a RegistrationConfig from environment variables.

    Args:
        environ: The mapping to read from.  Defaults to os.environ.

    Raises:
        ConfigurationError: If the endpoint or token is missing, or the
            credential location is not "query"/"header".
    """
    env = os.environ if environ is None else environ

    missing = [
        name for name in ("REGISTER_API_URL", "REGISTER_API_TOKEN")
        if not env.get(name, "").strip()
    ]
    if missing:
        raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

    return RegistrationConfig(
        endpoint_url=env["REGISTER_API_URL"].strip(),
        api_token=env["REGISTER_API_TOKEN"].strip(),
        credential_location=env.get(
            "REGISTER_API_CREDENTIAL_LOCATION", CREDENTIAL_IN_QUERY
        ).strip().lower(),
        credential_name=env.get("REGISTER_API_CREDENTIAL_NAME", "").strip()
        or DEFAULT_CREDENTIAL_NAME,
        default_logo_url=env.get("REGISTER_DEFAULT_LOGO_URL", "").strip()
        or DEFAULT_LOGO_URL,
    )
