# =============================================================================
# core/params.py  -  Parameter Table, Value Extraction & Defaults
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   1. Declares every parameter the register_user tool accepts
#      (PARAMETER_SCHEMA): its kind, whether it is required, and the
#      default used when the caller leaves it out.
#   2. extract_values() - unwraps parameters that arrive as {"value": x}.
#   3. apply_defaults() - fills omitted optional parameters.
#
# TWO PARAMETER ENCODINGS:
#   Some MCP clients send plain scalars ("username": "Jane"), others wrap
#   each argument with metadata ("username": {"value": "Jane", ...}).
#   extract_values() is the ONLY place that deals with this.  After it runs,
#   every value is a plain scalar (or None / whatever the caller sent).
#
# DEFAULTING RULE:
#   A field is defaulted only when it is absent or None.  An explicit ""
#   or 0 is the caller's choice and is kept.  Required fields are never
#   defaulted; their absence is reported by core/validation.py.
# =============================================================================

from dataclasses import dataclass, replace
from typing import Any, Iterator, Mapping

from core.config import DEFAULT_LOGO_URL

WRAPPED_VALUE_KEY = "value"

INTEGER = "integer"
STRING = "string"
EMAIL = "email"
URL = "url"


@dataclass(frozen=True)
class ParameterSpec:
    """Declarative description of one tool parameter."""

    name: str
    kind: str                          # INTEGER, STRING, EMAIL or URL
    description: str
    required: bool = False
    default: Any = None                # Only meaningful when required=False


class ParameterSchema:
    """Ordered, immutable collection of ParameterSpecs."""

    def __init__(self, specs: list[ParameterSpec]):
        for spec in specs:
            if spec.required and spec.default is not None:
                raise ValueError(f"Required parameter {spec.name!r} cannot have a default")
            if not spec.required and spec.default is None:
                raise ValueError(f"Optional parameter {spec.name!r} needs a default")
        self._specs = {spec.name: spec for spec in specs}

    def __iter__(self) -> Iterator[ParameterSpec]:
        return iter(self._specs.values())

    def get(self, name: str) -> ParameterSpec | None:
        return self._specs.get(name)

    def names(self) -> list[str]:
        return list(self._specs)

    def with_default(self, name: str, default: Any) -> "ParameterSchema":
        """Return a copy of the schema with one optional default replaced."""
        spec = self._specs[name]
        if spec.required:
            raise ValueError(f"Required parameter {name!r} cannot have a default")
        specs = [replace(s, default=default) if s.name == name else s for s in self]
        return ParameterSchema(specs)


# -----------------------------------------------------------------------------
# The register_user parameter table
# -----------------------------------------------------------------------------
# Order follows the payload layout (admin, exam, oem, user, client).
# The numeric defaults are the organization/exam the service registers
# users into when the caller does not say otherwise.
# -----------------------------------------------------------------------------
PARAMETER_SCHEMA = ParameterSchema([
    # --- admin ---
    ParameterSpec("admin_id", INTEGER, "Admin identifier", default=67),
    ParameterSpec("organization_id", INTEGER, "Organization identifier", default=76),
    ParameterSpec("superadmin_id", INTEGER, "Super-admin identifier", default=1),
    ParameterSpec("associate_id", INTEGER, "Associate identifier", default=1),
    # --- exam ---
    ParameterSpec("exam_id", INTEGER, "Exam identifier", default=2),
    ParameterSpec("set_id", INTEGER, "Question set identifier", default=16),
    # --- oem.header ---
    ParameterSpec("logo", URL, "Header logo URL", default=DEFAULT_LOGO_URL),
    ParameterSpec("name", STRING, "Brand name shown in the header", default=""),
    ParameterSpec("primary", STRING, "Primary brand color", default=""),
    ParameterSpec("background", STRING, "Background color", default=""),
    ParameterSpec("cta", STRING, "Call-to-action button color", default=""),
    ParameterSpec("cta_text_color", STRING, "Call-to-action text color", default=""),
    ParameterSpec("cta_text", STRING, "Call-to-action label", default=""),
    # --- oem.footer ---
    ParameterSpec("copyright_text", STRING, "Footer copyright text", default=""),
    ParameterSpec("test_name", STRING, "Test name shown in the footer", default=""),
    # --- oem.links ---
    ParameterSpec("backtodashboard", URL, "Back-to-dashboard link", default=""),
    ParameterSpec("testlink", URL, "Test link", default=""),
    ParameterSpec("reportlink", URL, "Report link", default=""),
    # --- user ---
    ParameterSpec("username", STRING, "User's full name", required=True),
    ParameterSpec("emailid", EMAIL, "User's email address", required=True),
    ParameterSpec("contact_no", STRING, "User's contact number", required=True),
    # --- client ---
    ParameterSpec("client_id", STRING, "Client identifier", default=""),
    ParameterSpec("client_log", STRING, "Client log reference", default=""),
])


def extract_values(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Unwrap {"value": x} parameters, one level deep.

    Args:
        raw: Parameter bag as received from the RPC layer.

    Returns:
        A new dict with the same keys.  Wrapped values are replaced by the
        scalar they carry; everything else (including None) is unchanged.
    """
    return {name: _unwrap(value) for name, value in raw.items()}


def _unwrap(value: Any) -> Any:
    if isinstance(value, Mapping) and WRAPPED_VALUE_KEY in value:
        return value[WRAPPED_VALUE_KEY]
    return value


def apply_defaults(
    params: Mapping[str, Any],
    schema: ParameterSchema = PARAMETER_SCHEMA,
) -> dict[str, Any]:
    """Fill every omitted optional parameter with its schema default.

    Caller-supplied values win, including "" and 0.  Required parameters
    and keys the schema does not know are passed through untouched.
    """
    resolved = dict(params)
    for spec in schema:
        if spec.required:
            continue
        if resolved.get(spec.name) is None:
            resolved[spec.name] = spec.default
    return resolved
