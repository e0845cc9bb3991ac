"""Unit tests for result classification and rendering."""

import httpx
import pytest

from core.errors import MISSING, UpstreamCallFailed, ValidationFailed, Violation
from core.models import Failure, FailureKind, Success
from core.results import format_number, render_result


class TestFailureClassification:
    """Failure.from_exception sorts exceptions into the three kinds."""

    def test_validation(self) -> None:
        exc = ValidationFailed([Violation("emailid", "required email address")])
        failure = Failure.from_exception(exc)

        assert failure.kind is FailureKind.VALIDATION
        assert failure.violations[0].field == "emailid"

    def test_upstream(self) -> None:
        failure = Failure.from_exception(UpstreamCallFailed(502, "Bad Gateway"))

        assert failure.kind is FailureKind.UPSTREAM
        assert failure.status_code == 502

    @pytest.mark.parametrize("exc", [
        httpx.ConnectError("connection refused"),
        ValueError("Expecting value: line 1 column 1 (char 0)"),
        RuntimeError(),
    ])
    def test_anything_else_is_unexpected(self, exc) -> None:
        failure = Failure.from_exception(exc)

        assert failure.kind is FailureKind.UNEXPECTED
        assert failure.message


class TestRenderResult:
    """Every outcome renders to exactly one text block."""

    def test_success(self) -> None:
        blocks = render_result(Success(payload={"id": 42}))

        assert len(blocks) == 1
        assert blocks[0].type == "text"
        assert blocks[0].text.startswith("User registration successful")
        assert '"id": 42' in blocks[0].text

    def test_validation_failure_lists_each_field(self) -> None:
        failure = Failure.from_exception(ValidationFailed([
            Violation("emailid", "email address", "not-an-email"),
            Violation("contact_no", "required string", MISSING),
        ]))
        text = render_result(failure)[0].text

        assert "invalid input" in text
        assert "- emailid: expected email address, got 'not-an-email'" in text
        assert "- contact_no: expected required string, got nothing" in text

    def test_upstream_failure_mentions_status(self) -> None:
        text = render_result(Failure.from_exception(UpstreamCallFailed(500, "Internal Server Error")))[0].text

        assert "rejected" in text
        assert "HTTP 500 Internal Server Error" in text

    def test_unexpected_failure_carries_message(self) -> None:
        text = render_result(Failure.from_exception(RuntimeError("socket closed")))[0].text

        assert "unexpected error" in text
        assert "socket closed" in text

    def test_unserializable_success_payload_does_not_raise(self) -> None:
        text = render_result(Success(payload={"when": object()}))[0].text
        assert text.startswith("User registration successful")


class TestFormatNumber:

    @pytest.mark.parametrize("value, expected", [
        (3.0, "3"), (3, "3"), (-2.0, "-2"), (0.5, "0.5"), (1e20, "100000000000000000000"),
    ])
    def test_format(self, value, expected) -> None:
        assert format_number(value) == expected
