"""
Contact form validation.

Checks run in a fixed order and the first failing check wins, so a
submission always gets exactly one message back.
"""

import re
from typing import Any, Mapping, Optional

REQUIRED_FIELDS = ("name", "email", "subject", "message")

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

ALL_FIELDS_REQUIRED = "All fields are required"
INVALID_EMAIL = "Please provide a valid email address"
NAME_TOO_SHORT = "Name must be at least 2 characters long"
SUBJECT_TOO_SHORT = "Subject must be at least 5 characters long"
MESSAGE_TOO_SHORT = "Message must be at least 10 characters long"

# (field, minimum trimmed length, message)
MIN_LENGTHS = (
    ("name", 2, NAME_TOO_SHORT),
    ("subject", 5, SUBJECT_TOO_SHORT),
    ("message", 10, MESSAGE_TOO_SHORT),
)


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def text_length(value: str) -> int:
    """Length in UTF-16 code units, so a character outside the BMP counts as two"""
    return len(value.encode("utf-16-le", errors="surrogatepass")) // 2


def validate_contact_form(data: Mapping[str, Any]) -> Optional[str]:
    """
    Validate raw contact form fields.

    A field that is absent, not a string, or the empty string counts as
    missing. Whitespace-only values are not missing; the length checks
    reject them instead.

    Args:
        data: Submitted fields as parsed from the request body

    Returns:
        str: The rejection message, or None when the submission is accepted
    """
    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if not isinstance(value, str) or not value:
            return ALL_FIELDS_REQUIRED

    if not is_valid_email(data["email"]):
        return INVALID_EMAIL

    for field, min_length, message in MIN_LENGTHS:
        if text_length(data[field].strip()) < min_length:
            return message

    return None
