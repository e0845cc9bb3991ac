"""Shared fixtures: a hand-built config and a fake registration service."""

import json
from typing import Any, Callable

import httpx
import pytest

from core.config import RegistrationConfig

ENDPOINT = "https://registration.test-platform.io/api/register"
TOKEN = "secret-token"


class FakeRegistrationService:
    """Records every request and answers with a canned response."""

    def __init__(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        self.body = {"id": 42} if body is None else body
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def config() -> RegistrationConfig:
    return RegistrationConfig(endpoint_url=ENDPOINT, api_token=TOKEN)


@pytest.fixture
def service_factory() -> Callable[..., FakeRegistrationService]:
    return FakeRegistrationService


@pytest.fixture
def jane() -> dict[str, Any]:
    """The three required parameters, everything else omitted."""
    return {
        "username": "Jane Doe",
        "emailid": "jane@example.com",
        "contact_no": "5551234",
    }
