"""
Relay of contact form submissions to the site owner's inbox.

A validated submission is rendered into an HTML and a plain-text email and
handed to Resend in a single call. There is no retry and no idempotency key:
submitting the same form twice sends two emails.
"""

import logging
from datetime import datetime
from typing import Optional
from contact_relay.core.config import Settings
from contact_relay.core.email_client import ResendClient
from contact_relay.models.contact import ContactSubmission
from contact_relay.models.email import SendEmailRequest, SendEmailResult

logger = logging.getLogger(__name__)

SENDER = "Contact Form <onboarding@aihridoy.com>"
SUBJECT_PREFIX = "Contact Form: "


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a local time like `10/18/2026, 3:04:05 PM`"""
    moment = moment or datetime.now()
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year}, {hour}:{moment:%M:%S} {meridiem}"


def render_html(submission: ContactSubmission, sent_on: str) -> str:
    message_html = submission.message.replace("\n", "<br>")
    return f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
          <div style="background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); padding: 30px; border-radius: 10px; margin-bottom: 20px;">
            <h1 style="color: white; margin: 0; text-align: center;">New Contact Form Submission</h1>
          </div>

          <div style="background: #f8f9fa; padding: 25px; border-radius: 8px; margin-bottom: 20px;">
            <h2 style="color: #333; margin-top: 0;">Contact Details</h2>
            <table style="width: 100%; border-collapse: collapse;">
              <tr>
                <td style="padding: 10px 0; border-bottom: 1px solid #dee2e6; font-weight: bold; color: #495057;">Name:</td>
                <td style="padding: 10px 0; border-bottom: 1px solid #dee2e6; color: #6c757d;">{submission.name}</td>
              </tr>
              <tr>
                <td style="padding: 10px 0; border-bottom: 1px solid #dee2e6; font-weight: bold; color: #495057;">Email:</td>
                <td style="padding: 10px 0; border-bottom: 1px solid #dee2e6; color: #6c757d;">{submission.email}</td>
              </tr>
              <tr>
                <td style="padding: 10px 0; border-bottom: 1px solid #dee2e6; font-weight: bold; color: #495057;">Subject:</td>
                <td style="padding: 10px 0; border-bottom: 1px solid #dee2e6; color: #6c757d;">{submission.subject}</td>
              </tr>
            </table>
          </div>

          <div style="background: #f8f9fa; padding: 25px; border-radius: 8px;">
            <h3 style="color: #333; margin-top: 0;">Message</h3>
            <div style="background: white; padding: 20px; border-radius: 6px; border-left: 4px solid #667eea;">
              <p style="margin: 0; line-height: 1.6; color: #495057;">{message_html}</p>
            </div>
          </div>

          <div style="margin-top: 20px; text-align: center; color: #6c757d; font-size: 14px;">
            <p>This email was sent from your portfolio contact form.</p>
            <p>Sent on {sent_on}</p>
          </div>
        </div>
      """


def render_text(submission: ContactSubmission, sent_on: str) -> str:
    return (
        "New Contact Form Submission\n"
        "\n"
        f"Name: {submission.name}\n"
        f"Email: {submission.email}\n"
        f"Subject: {submission.subject}\n"
        "\n"
        "Message:\n"
        f"{submission.message}\n"
        "\n"
        f"Sent on {sent_on}\n"
    )


def build_email(submission: ContactSubmission, settings: Settings, sent_on: Optional[str] = None) -> SendEmailRequest:
    """
    Render a submission into the email Resend will deliver.

    Args:
        submission: Validated contact form fields
        settings: Application settings, provides the recipient address
        sent_on: Preformatted timestamp, defaults to the current local time

    Returns:
        SendEmailRequest: Payload ready for ResendClient.send
    """
    sent_on = sent_on or format_timestamp()
    return SendEmailRequest(
        sender=SENDER,
        to=[settings.recipient_email],
        subject=f"{SUBJECT_PREFIX}{submission.subject}",
        html=render_html(submission, sent_on),
        text=render_text(submission, sent_on),
    )


async def relay_submission(
    submission: ContactSubmission,
    settings: Settings,
    client: ResendClient
) -> SendEmailResult:
    """
    Send one contact form submission through Resend.

    Provider-reported failures are returned, not raised. Timeouts and
    transport errors from httpx propagate to the caller.
    """
    email = build_email(submission, settings)
    logger.debug(f"Relaying contact submission to {settings.recipient_email}: {email.subject}")
    return await client.send(email)
