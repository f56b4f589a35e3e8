from __future__ import annotations

import pytest

from contact_relay.core.validation import (
    ALL_FIELDS_REQUIRED,
    INVALID_EMAIL,
    MESSAGE_TOO_SHORT,
    NAME_TOO_SHORT,
    SUBJECT_TOO_SHORT,
    is_valid_email,
    text_length,
    validate_contact_form,
)


def test_valid_submission_passes(valid_submission) -> None:
    assert validate_contact_form(valid_submission) is None


@pytest.mark.parametrize("field", ["name", "email", "subject", "message"])
def test_missing_field_is_rejected(valid_submission, field: str) -> None:
    del valid_submission[field]
    assert validate_contact_form(valid_submission) == ALL_FIELDS_REQUIRED


@pytest.mark.parametrize("field", ["name", "email", "subject", "message"])
def test_empty_field_is_rejected(submission_with, field: str) -> None:
    assert validate_contact_form(submission_with(**{field: ""})) == ALL_FIELDS_REQUIRED


@pytest.mark.parametrize("value", [None, 42, ["Jane"], {"first": "Jane"}])
def test_non_string_field_counts_as_missing(submission_with, value) -> None:
    assert validate_contact_form(submission_with(name=value)) == ALL_FIELDS_REQUIRED


def test_missing_field_wins_over_bad_email(submission_with) -> None:
    assert validate_contact_form(submission_with(email="nope", message="")) == ALL_FIELDS_REQUIRED


@pytest.mark.parametrize(
    "email",
    [
        "jane.example.com",
        "jane@example",
        "jane doe@example.com",
        "jane@exa mple.com",
        "jane@@example.com",
        " jane@example.com",
        "jane@example.com\n",
        "@example.com",
        "jane@.com",
        "jane@example.",
    ],
)
def test_invalid_email_is_rejected(submission_with, email: str) -> None:
    assert validate_contact_form(submission_with(email=email)) == INVALID_EMAIL


@pytest.mark.parametrize("email", ["jane@example.com", "a@b.c", "first.last+tag@mail.example.co.uk"])
def test_valid_email_pattern(email: str) -> None:
    assert is_valid_email(email)


def test_bad_email_wins_over_short_name(submission_with) -> None:
    assert validate_contact_form(submission_with(email="bad", name="J")) == INVALID_EMAIL


def test_name_length_boundary(submission_with) -> None:
    assert validate_contact_form(submission_with(name="J")) == NAME_TOO_SHORT
    assert validate_contact_form(submission_with(name="  J  ")) == NAME_TOO_SHORT
    assert validate_contact_form(submission_with(name="Jo")) is None


def test_whitespace_only_name_fails_length_check(submission_with) -> None:
    assert validate_contact_form(submission_with(name="   ")) == NAME_TOO_SHORT


def test_subject_length_boundary(submission_with) -> None:
    assert validate_contact_form(submission_with(subject="Hell")) == SUBJECT_TOO_SHORT
    assert validate_contact_form(submission_with(subject=" Hell ")) == SUBJECT_TOO_SHORT
    assert validate_contact_form(submission_with(subject="Hello")) is None


def test_message_length_boundary(submission_with) -> None:
    assert validate_contact_form(submission_with(message="123456789")) == MESSAGE_TOO_SHORT
    assert validate_contact_form(submission_with(message="\n123456789\n")) == MESSAGE_TOO_SHORT
    assert validate_contact_form(submission_with(message="1234567890")) is None


def test_text_length_counts_utf16_code_units() -> None:
    assert text_length("Jo") == 2
    assert text_length("é") == 1
    assert text_length("\U0001F600") == 2
    assert text_length("") == 0


def test_astral_characters_count_twice_toward_length(submission_with) -> None:
    assert validate_contact_form(submission_with(name="\U0001F600")) is None
    assert validate_contact_form(submission_with(subject="\U0001F600\U0001F600ab")) is None
    assert validate_contact_form(submission_with(subject="\U0001F600ab")) == SUBJECT_TOO_SHORT


def test_length_checks_run_in_order(submission_with) -> None:
    assert validate_contact_form(submission_with(name="J", subject="Hi", message="short")) == NAME_TOO_SHORT
    assert validate_contact_form(submission_with(subject="Hi", message="short")) == SUBJECT_TOO_SHORT


def test_extra_fields_are_ignored(submission_with) -> None:
    assert validate_contact_form(submission_with(phone="555-0100", honeypot="")) is None
