# =============================================================================
# core/validation.py  -  Strict Re-validation of Tool Parameters
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the loosely-typed, defaulted parameter dict into a
#   ValidatedRegistration - a frozen pydantic model whose fields are
#   guaranteed to be present and well-formed - or raises ValidationFailed
#   listing EVERY bad field at once.
#
# FIELD RULES (by ParameterSpec.kind):
#   integer -> int, or a string holding an integer ("67").  Booleans,
#              fractions and non-numeric strings are rejected.
#   string  -> str only (no numbers, no booleans).  Required strings must
#              not be blank.
#   email   -> a bare address checked with email-validator.  "Name <addr>"
#              is rejected and the caller's string is kept as sent.
#   url     -> "" or an absolute http(s) URL.  The caller's string is kept
#              exactly as sent; pydantic's HttpUrl is only used to check it.
#
#   Unknown parameter names are rejected rather than silently dropped.
# =============================================================================

from typing import Annotated, Any, Mapping

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    HttpUrl,
    StrictStr,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError

from core.errors import MISSING, ValidationFailed, Violation
from core.params import EMAIL, INTEGER, PARAMETER_SCHEMA, STRING, URL, ParameterSchema

_HTTP_URL = TypeAdapter(HttpUrl)

_EXPECTED = {
    INTEGER: "integer",
    STRING: "string",
    EMAIL: "email address",
    URL: "absolute http(s) URL or empty string",
}


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass; True must not become 1.
    if isinstance(value, bool):
        raise ValueError("booleans are not integers")
    return value


def _check_url(value: str) -> str:
    if value:
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError:
            raise ValueError("not an absolute http(s) URL") from None
    return value


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False, allow_display_name=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from None
    return value


def _check_not_blank(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError("blank_string", "must not be blank")
    return value


Integer = Annotated[int, BeforeValidator(_reject_bool)]
Url = Annotated[StrictStr, AfterValidator(_check_url)]
RequiredText = Annotated[StrictStr, AfterValidator(_check_not_blank)]
Email = Annotated[StrictStr, AfterValidator(_check_email)]


class ValidatedRegistration(BaseModel):
    """Fully-typed register_user parameters.  Immutable once built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    admin_id: Integer
    organization_id: Integer
    superadmin_id: Integer
    associate_id: Integer

    exam_id: Integer
    set_id: Integer

    logo: Url
    name: StrictStr
    primary: StrictStr
    background: StrictStr
    cta: StrictStr
    cta_text_color: StrictStr
    cta_text: StrictStr

    copyright_text: StrictStr
    test_name: StrictStr

    backtodashboard: Url
    testlink: Url
    reportlink: Url

    username: RequiredText
    emailid: Email
    contact_no: RequiredText

    client_id: StrictStr
    client_log: StrictStr


def validate_registration(
    params: Mapping[str, Any] | ValidatedRegistration,
    schema: ParameterSchema = PARAMETER_SCHEMA,
) -> ValidatedRegistration:
    """Validate a defaulted parameter record.

    Args:
        params: Output of apply_defaults(), or an existing
            ValidatedRegistration (re-validated from its own fields).
        schema: Used to describe what each failing field expected.

    Returns:
        The ValidatedRegistration.

    Raises:
        ValidationFailed: With one Violation per offending field.
    """
    if isinstance(params, ValidatedRegistration):
        params = params.model_dump()

    try:
        return ValidatedRegistration.model_validate(dict(params))
    except ValidationError as exc:
        raise ValidationFailed(_violations(exc, params, schema)) from None


def _violations(
    exc: ValidationError,
    params: Mapping[str, Any],
    schema: ParameterSchema,
) -> list[Violation]:
    """Collapse pydantic's error list into one Violation per field."""
    violations: dict[str, Violation] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "<parameters>"
        if field in violations:
            continue

        observed = params.get(field, MISSING)
        spec = schema.get(field)

        if spec is None:
            expected = "no such parameter"
        elif observed is MISSING or observed is None:
            expected = f"required {_EXPECTED[spec.kind]}"
        elif error["type"] == "blank_string":
            expected = f"non-empty {_EXPECTED[spec.kind]}"
        else:
            expected = _EXPECTED[spec.kind]

        violations[field] = Violation(field=field, expected=expected, observed=observed)
    return list(violations.values())
