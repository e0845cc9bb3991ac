# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of what leaves the core:
#
#   RegistrationPayload  -> the nested JSON body the registration API expects
#   Success / Failure    -> the tagged outcome of one tool call
#   ContentBlock         -> one unit of the RPC response ({type, text})
#
# The strict, validated view of the caller's input lives next to its
# validator in core/validation.py (ValidatedRegistration).
#
# WIRE CONTRACT:
#   Field names in the payload dataclasses are the registration service's
#   field names.  asdict() on a RegistrationPayload IS the request body, so
#   renaming a field here changes what goes over the wire.
# =============================================================================

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from core.errors import UpstreamCallFailed, ValidationFailed, Violation


# -----------------------------------------------------------------------------
# RegistrationPayload and its groups
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class AdminGroup:
    """Organizational identifiers the user is registered under."""

    admin_id: int
    organization_id: int
    superadmin_id: int
    associate_id: int


@dataclass(frozen=True)
class ExamGroup:
    """Which exam (and question set) the user is enrolled into."""

    exam_id: int
    set_id: int


@dataclass(frozen=True)
class OemColor:
    primary: str
    background: str
    cta: str                           # Call-to-action button color
    cta_text_color: str
    cta_text: str


@dataclass(frozen=True)
class OemHeader:
    logo: str                          # Absolute URL, or "" for none
    name: str
    color: OemColor


@dataclass(frozen=True)
class OemFooter:
    copyright_text: str
    test_name: str


@dataclass(frozen=True)
class OemLinks:
    backtodashboard: str
    testlink: str
    reportlink: str


@dataclass(frozen=True)
class OemGroup:
    """White-label branding shown on the exam pages."""

    header: OemHeader
    footer: OemFooter
    links: OemLinks


@dataclass(frozen=True)
class UserGroup:
    """The end user being registered."""

    username: str
    emailid: str
    contact_no: str


@dataclass(frozen=True)
class RegistrationPayload:
    """The complete request body for the registration service."""

    admin: AdminGroup
    exam: ExamGroup
    oem: OemGroup
    user: UserGroup
    client_id: str = ""
    client_log: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# -----------------------------------------------------------------------------
# Tool call outcome
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ContentBlock:
    """One block of a tool response.  Only text blocks are produced."""

    text: str
    type: str = "text"


class FailureKind(str, Enum):
    VALIDATION = "validation"          # Caller input was invalid
    UPSTREAM = "upstream"              # Registration service said no
    UNEXPECTED = "unexpected"          # Anything else (network, bad JSON, bugs)


@dataclass(frozen=True)
class Success:
    """The registration service accepted the call; payload is its response."""

    payload: Any


@dataclass(frozen=True)
class Failure:
    """A tool call that did not succeed, classified for the caller."""

    kind: FailureKind
    message: str
    violations: tuple[Violation, ...] = field(default_factory=tuple)
    status_code: int | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Failure":
        """Classify an exception raised anywhere in the pipeline."""
        if isinstance(exc, ValidationFailed):
            return cls(
                kind=FailureKind.VALIDATION,
                message=str(exc),
                violations=tuple(exc.violations),
            )
        if isinstance(exc, UpstreamCallFailed):
            return cls(
                kind=FailureKind.UPSTREAM,
                message=str(exc),
                status_code=exc.status_code,
            )
        return cls(kind=FailureKind.UNEXPECTED, message=str(exc) or type(exc).__name__)


ToolResult = Success | Failure
