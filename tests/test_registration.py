"""
Integration tests for the register_user pipeline.

Each scenario drives core.registration.register_user end to end against a
fake registration service and checks both the outcome and what (if
anything) was sent over the wire.
"""

import httpx
import pytest

from core.config import DEFAULT_LOGO_URL, RegistrationConfig
from core.models import FailureKind, Success
from core.registration import register_user
from core.results import render_result


class TestScenarios:
    """The documented request/response scenarios."""

    @pytest.mark.asyncio
    async def test_a_defaults_applied_and_payload_sent(self, config, jane, service_factory) -> None:
        service = service_factory()
        async with service.client() as client:
            result = await register_user(jane, config, client)

        assert isinstance(result, Success)
        body = service.last_body
        assert body["admin"] == {
            "admin_id": 67, "organization_id": 76, "superadmin_id": 1, "associate_id": 1,
        }
        assert body["exam"] == {"exam_id": 2, "set_id": 16}
        assert body["oem"]["header"]["logo"] == DEFAULT_LOGO_URL
        assert body["oem"]["header"]["name"] == ""
        assert body["oem"]["links"] == {"backtodashboard": "", "testlink": "", "reportlink": ""}
        assert body["user"]["emailid"] == "jane@example.com"

    @pytest.mark.asyncio
    async def test_b_missing_emailid_makes_no_call(self, config, jane, service_factory) -> None:
        service = service_factory()
        del jane["emailid"]
        async with service.client() as client:
            result = await register_user(jane, config, client)

        assert result.kind is FailureKind.VALIDATION
        assert [v.field for v in result.violations] == ["emailid"]
        assert "emailid" in render_result(result)[0].text
        assert service.requests == []

    @pytest.mark.asyncio
    async def test_c_malformed_email(self, config, jane, service_factory) -> None:
        service = service_factory()
        async with service.client() as client:
            result = await register_user({**jane, "emailid": "not-an-email"}, config, client)

        assert result.kind is FailureKind.VALIDATION
        assert result.violations[0].expected == "email address"
        assert service.requests == []

    @pytest.mark.asyncio
    async def test_d_upstream_500_is_not_retried(self, config, jane, service_factory) -> None:
        service = service_factory(status_code=500)
        async with service.client() as client:
            result = await register_user(jane, config, client)

        assert result.kind is FailureKind.UPSTREAM
        assert result.status_code == 500
        assert len(service.requests) == 1
        text = render_result(result)[0].text
        assert "failed" in text
        assert "500" in text

    @pytest.mark.asyncio
    async def test_e_success_body_is_reported(self, config, jane, service_factory) -> None:
        service = service_factory(body={"id": 42})
        async with service.client() as client:
            result = await register_user(jane, config, client)

        assert result == Success(payload={"id": 42})
        text = render_result(result)[0].text
        assert text.startswith("User registration successful")
        assert '"id": 42' in text


class TestPipeline:
    """Behavior around the scenarios."""

    @pytest.mark.asyncio
    async def test_wrapped_parameters_are_accepted(self, config, service_factory) -> None:
        service = service_factory()
        raw = {
            "username": {"value": "Jane Doe", "description": "full name"},
            "emailid": {"value": "jane@example.com"},
            "contact_no": "5551234",
            "exam_id": {"value": 9},
        }
        async with service.client() as client:
            result = await register_user(raw, config, client)

        assert isinstance(result, Success)
        assert service.last_body["user"]["username"] == "Jane Doe"
        assert service.last_body["exam"]["exam_id"] == 9

    @pytest.mark.asyncio
    async def test_configured_logo_is_the_default(self, jane, service_factory) -> None:
        config = RegistrationConfig(
            endpoint_url="https://registration.test-platform.io/api/register",
            api_token="t",
            default_logo_url="https://cdn.acme.io/blank.png",
        )
        service = service_factory()
        async with service.client() as client:
            await register_user(jane, config, client)

        assert service.last_body["oem"]["header"]["logo"] == "https://cdn.acme.io/blank.png"

    @pytest.mark.asyncio
    async def test_explicit_empty_logo_is_kept(self, config, jane, service_factory) -> None:
        service = service_factory()
        async with service.client() as client:
            await register_user({**jane, "logo": ""}, config, client)

        assert service.last_body["oem"]["header"]["logo"] == ""

    @pytest.mark.asyncio
    async def test_network_error_is_unexpected_failure(self, config, jane) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(refuse)) as client:
            result = await register_user(jane, config, client)

        assert result.kind is FailureKind.UNEXPECTED
        assert "connection refused" in render_result(result)[0].text

    @pytest.mark.asyncio
    async def test_non_json_success_body_is_unexpected_failure(self, config, jane) -> None:
        def plain_text(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="OK")

        async with httpx.AsyncClient(transport=httpx.MockTransport(plain_text)) as client:
            result = await register_user(jane, config, client)

        assert result.kind is FailureKind.UNEXPECTED

    @pytest.mark.asyncio
    async def test_broken_logo_default_is_reported_not_raised(self, jane, service_factory) -> None:
        config = RegistrationConfig(
            endpoint_url="https://registration.test-platform.io/api/register",
            api_token="t",
            default_logo_url=None,
        )
        service = service_factory()
        async with service.client() as client:
            result = await register_user(jane, config, client)

        assert result.kind is FailureKind.UNEXPECTED
        assert service.requests == []
