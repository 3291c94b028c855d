"""User Creation Rules — tests for the declared constraints on UserCreationRequest.

Tests cover:
    - Well-formed requests are valid
    - Each violated constraint yields exactly one message under its field
    - Two violations on one field yield two distinct messages
    - Missing fields report only the not-empty message
    - The default registry serves UserCreationRequest only
"""

import pytest

from nucleus.core.rule_sets import (
    USER_CREATION_RULES, build_default_registry, default_registry,
)
from nucleus.schemas.data import DataQueryFilter
from nucleus.schemas.user import UserCreationRequest

EMAIL_FORMAT = "The format of the ‘Email’ value is incorrect."
USERNAME_FORMAT = "The format of the ‘Username’ value is incorrect."
USERNAME_LENGTH = "The username must be at least 10 characters long."
PASSWORD_LENGTH = "The password must be at least 8 characters long."
PASSWORD_UPPER = "The password must contain at least one uppercase letter."
PASSWORD_DIGIT = "The password must contain at least one number."


def _validate(**overrides):
    fields = {
        "username": "johndoe123",
        "email": "john.doe@example.com",
        "password": "Password123",
    }
    fields.update(overrides)
    payload = UserCreationRequest.model_construct(**fields)
    return default_registry.resolve(UserCreationRequest).validate(payload)


def test_well_formed_request_is_valid():
    assert _validate().is_valid


@pytest.mark.parametrize("username,email,password", [
    ("abcdefghij", "a@b.c", "ABCDEFG1"),
    ("USER123456789", "first.last@mail.example.org", "xY9xxxxxxxxx"),
    ("0123456789", "x@y.io", "!!A1!!!!"),
])
def test_valid_inputs_across_shapes(username, email, password):
    assert _validate(username=username, email=email, password=password).is_valid


# ─── email ───────────────────────────────────────────────────────

@pytest.mark.parametrize("email", [
    "bad-email", "no-at.example.com", "a@b", "a b@example.com",
    "a@@example.com", "@example.com", "a@example.",
])
def test_malformed_email_has_one_message(email):
    assert _validate(email=email).to_dict() == {"email": [EMAIL_FORMAT]}


# ─── username ────────────────────────────────────────────────────

def test_short_username_reports_length_only():
    assert _validate(username="short").to_dict() == {
        "username": [USERNAME_LENGTH],
    }


def test_non_alphanumeric_username_reports_format_only():
    assert _validate(username="john_doe_123").to_dict() == {
        "username": [USERNAME_FORMAT],
    }


def test_short_non_alphanumeric_username_reports_both():
    assert _validate(username="jo-hn").to_dict() == {
        "username": [USERNAME_FORMAT, USERNAME_LENGTH],
    }


# ─── password ────────────────────────────────────────────────────

def test_short_password_without_uppercase_reports_two_messages():
    assert _validate(password="pass1").to_dict() == {
        "password": [PASSWORD_LENGTH, PASSWORD_UPPER],
    }


def test_password_without_digit():
    assert _validate(password="Passwordxyz").to_dict() == {
        "password": [PASSWORD_DIGIT],
    }


def test_weak_password_reports_every_violation():
    assert _validate(password="weak").to_dict() == {
        "password": [PASSWORD_LENGTH, PASSWORD_UPPER, PASSWORD_DIGIT],
    }


# ─── scenarios ───────────────────────────────────────────────────

def test_all_fields_invalid_reports_every_field():
    outcome = _validate(username="short", email="bad-email", password="weak")
    assert outcome.to_dict() == {
        "email": [EMAIL_FORMAT],
        "username": [USERNAME_LENGTH],
        "password": [PASSWORD_LENGTH, PASSWORD_UPPER, PASSWORD_DIGIT],
    }


@pytest.mark.parametrize("field_name,message", [
    ("email", "'Email' must not be empty."),
    ("username", "'Username' must not be empty."),
    ("password", "'Password' must not be empty."),
])
def test_missing_field_reports_only_not_empty(field_name, message):
    assert _validate(**{field_name: None}).to_dict() == {field_name: [message]}


# ─── registry ────────────────────────────────────────────────────

def test_default_registry_covers_user_creation_only():
    registry = build_default_registry()
    assert UserCreationRequest in registry
    assert DataQueryFilter not in registry
    assert registry.resolve(UserCreationRequest).rule_set is USER_CREATION_RULES
