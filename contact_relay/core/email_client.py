"""
Thin async client for the Resend transactional email API.

Only the single call the contact form needs is implemented: POST /emails.
Provider-reported failures (any non-2xx answer, or a 2xx answer without an
email id) come back as a SendEmailResult with `error` set, the same
{data, error} shape the official Resend SDKs return. Timeouts and transport failures are raised as httpx
exceptions and left to the caller.
"""

import httpx
import logging
from typing import Any, Optional
from fastapi import Depends
from contact_relay.core.config import Settings, get_settings
from contact_relay.models.email import SendEmailRequest, SendEmailResult, EmailData, ProviderError

logger = logging.getLogger(__name__)


class ResendClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.resend.com",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def send(self, email: SendEmailRequest) -> SendEmailResult:
        """
        Submit one email to Resend.

        Args:
            email: Fully rendered email (sender, recipients, subject, html, text)

        Returns:
            SendEmailResult: `data.id` holds the Resend message id on success,
            `error` holds the provider's error detail otherwise
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.post(
                f"{self.base_url}/emails",
                json=email.model_dump(by_alias=True),
                headers=headers,
                timeout=self.timeout
            )

        if response.is_success:
            body = read_json(response)
            email_id = body.get("id") if isinstance(body, dict) else None
            if email_id is None or email_id == "":
                logger.warning(f"Resend answered {response.status_code} without an email id: {response.text[:200]}")
                return SendEmailResult(error=ProviderError(
                    name="invalid_response",
                    message=f"Resend answered {response.status_code} without an email id",
                    statusCode=response.status_code,
                ))
            logger.debug(f"Resend accepted email: {body}")
            return SendEmailResult(data=EmailData(id=str(email_id)))

        return SendEmailResult(error=parse_provider_error(response))


def read_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def parse_provider_error(response: httpx.Response) -> ProviderError:
    """
    Build a ProviderError from a failed Resend response.

    Fields are coerced rather than trusted: a non-string `name` is
    stringified and a `statusCode` that is not an int falls back to the
    HTTP status. Bodies without a message get a synthesised error.
    """
    body = read_json(response)

    if isinstance(body, dict) and body.get("message"):
        name = body.get("name")
        status_code = body.get("statusCode")
        if not isinstance(status_code, int) or isinstance(status_code, bool):
            status_code = response.status_code
        return ProviderError(
            name=str(name) if name is not None else None,
            message=str(body["message"]),
            statusCode=status_code,
        )

    return ProviderError(
        name="application_error",
        message=f"{response.status_code} {response.reason_phrase}".strip(),
        statusCode=response.status_code,
    )


def get_email_client(settings: Settings = Depends(get_settings)) -> ResendClient:
    return ResendClient(
        api_key=settings.resend_api_key,
        base_url=settings.resend_api_url,
        timeout=settings.email_timeout_seconds,
    )
