from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from contact_relay.core.config import Settings
from contact_relay.core.email_client import get_email_client
from contact_relay.main import create_app
from contact_relay.models.email import EmailData, ProviderError, SendEmailRequest, SendEmailResult


class StubEmailClient:
    """Records every email and answers with a fixed result."""

    def __init__(self, result: Optional[SendEmailResult] = None, exc: Optional[Exception] = None) -> None:
        self.result = result or SendEmailResult(data=EmailData(id="abc123"))
        self.exc = exc
        self.sent: List[SendEmailRequest] = []

    async def send(self, email: SendEmailRequest) -> SendEmailResult:
        self.sent.append(email)
        if self.exc is not None:
            raise self.exc
        return self.result


@pytest.fixture
def valid_submission() -> Dict[str, str]:
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "subject": "Hello there",
        "message": "This is a test message.",
    }


@pytest.fixture
def submission_with(valid_submission: Dict[str, str]) -> Callable[..., Dict[str, Any]]:
    """Valid submission with some fields replaced."""

    def _with(**overrides: Any) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(valid_submission)
        data.update(overrides)
        return data

    return _with


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        resend_api_key="re_test_key",
        recipient_email="owner@example.com",
        app_env="development",
    )


@pytest.fixture
def make_email_client() -> Callable[..., StubEmailClient]:
    return StubEmailClient


@pytest.fixture
def email_client() -> StubEmailClient:
    return StubEmailClient()


@pytest.fixture
def failing_email_client() -> StubEmailClient:
    return StubEmailClient(
        result=SendEmailResult(
            error=ProviderError(name="validation_error", message="Invalid `to` field", statusCode=422)
        )
    )


@pytest.fixture
def make_client() -> Callable[[Settings, Any], TestClient]:
    def _make(settings: Settings, email_client: Any) -> TestClient:
        app = create_app(settings)
        app.dependency_overrides[get_email_client] = lambda: email_client
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(settings: Settings, email_client: StubEmailClient, make_client) -> TestClient:
    return make_client(settings, email_client)
