"""
Contact form endpoint.

Accepts JSON or form-encoded submissions, validates them and relays them as
an email through Resend. Every answer carries {success, message}; a
successful relay also echoes the Resend message id as `emailId`.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from typing import Dict, Any
import json
import logging
from contact_relay.core.config import Settings, get_settings
from contact_relay.core.email_client import ResendClient, get_email_client
from contact_relay.core.email_relay import relay_submission
from contact_relay.core.validation import REQUIRED_FIELDS, validate_contact_form
from contact_relay.models.contact import ContactSubmission, ContactResponse

router = APIRouter()
logger = logging.getLogger(__name__)

SENT_MESSAGE = "Message sent successfully!"
DELIVERY_FAILED_MESSAGE = "Failed to send email. Please try again later."
SERVER_ERROR_MESSAGE = "Server error. Please try again later."

FORM_MEDIA_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ContactResponse(success=False, message=message).model_dump(exclude_none=True)
    )


async def read_submission_fields(request: Request) -> Dict[str, Any]:
    """
    Parse the request body into a flat dict of submitted fields.

    JSON bodies must decode to an object, anything else counts as an empty
    submission. Malformed JSON raises and ends up in the global error handler.
    Bodies with any other content type are treated as empty.
    """
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";")[0].strip().lower()

    if media_type == "application/json" or media_type.endswith("+json"):
        body = await request.body()
        if not body.strip():
            return {}
        data = json.loads(body)
        return data if isinstance(data, dict) else {}

    if media_type in FORM_MEDIA_TYPES:
        form = await request.form()
        return dict(form.items())

    return {}


@router.post("/contact", status_code=status.HTTP_200_OK)
async def submit_contact_form(
    request: Request,
    settings: Settings = Depends(get_settings),
    email_client: ResendClient = Depends(get_email_client)
):
    """
    Validate a contact form submission and relay it to the site owner.

    Returns:
        200 with the Resend message id, 400 with the first validation
        failure, or 500 when the email could not be sent
    """
    fields = await read_submission_fields(request)

    error_message = validate_contact_form(fields)
    if error_message:
        logger.info(f"Rejected contact submission: {error_message}")
        return failure(status.HTTP_400_BAD_REQUEST, error_message)

    submission = ContactSubmission(**{field: fields[field] for field in REQUIRED_FIELDS})

    try:
        result = await relay_submission(submission, settings, email_client)

        if not result.ok:
            logger.error(f"❌ Resend error: {result.error.model_dump()}")
            return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, DELIVERY_FAILED_MESSAGE)

        logger.info(f"✅ Email sent successfully: {result.data.id}")
        return ContactResponse(success=True, message=SENT_MESSAGE, emailId=result.data.id).model_dump()

    except Exception as e:
        logger.exception(f"Server error while relaying contact submission: {str(e)}")
        return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)
