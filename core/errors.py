# =============================================================================
# core/errors.py  -  Error Taxonomy
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Defines the conditions the registration pipeline can raise.  Each one
#   carries enough detail for core/results.py to explain the failure to the
#   caller without re-inspecting anything:
#
#     ValidationFailed    -> the caller's input was invalid (per-field detail)
#     UpstreamCallFailed  -> the registration service answered non-2xx
#     ConfigurationError  -> the process environment is incomplete (startup)
#
#   Anything else that escapes (network errors, bad JSON) is treated as an
#   "unexpected" failure by the result formatter.
# =============================================================================

from dataclasses import dataclass
from typing import Any


class _Missing:
    """Sentinel for a parameter that was never supplied."""

    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Violation:
    """One field that failed validation."""

    field: str                         # Parameter name, e.g. "emailid"
    expected: str                      # "email address", "required string", ...
    observed: Any = MISSING            # What the caller sent (or MISSING)

    def describe(self) -> str:
        if self.observed is MISSING:
            return f"{self.field}: expected {self.expected}, got nothing"
        return f"{self.field}: expected {self.expected}, got {self.observed!r}"


class RegistrationError(Exception):
    """Base class for registration pipeline failures."""


class ValidationFailed(RegistrationError):
    """Raised when one or more parameters violate the parameter schema."""

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(f"invalid parameters: {fields}")


class UpstreamCallFailed(RegistrationError):
    """Raised when the registration service returns a non-2xx status."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code} {reason}".rstrip())


class ConfigurationError(RegistrationError):
    """Raised at startup when required environment settings are missing."""
