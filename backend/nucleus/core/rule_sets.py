"""Rule Sets — the declared constraints for every validated payload type.

Invariants:
    - USER_CREATION_RULES covers email, username, password (in that order)
    - Every field starts with a required (null) rule
    - Each distinct constraint carries its own message
    - DataQueryFilter has no rule set: it is accepted unconditionally
"""

from nucleus.core.rules import RuleSet, contains, matches, min_length, not_null
from nucleus.core.validator import ValidatorRegistry
from nucleus.schemas.user import UserCreationRequest


EMAIL_PATTERN = r"[^@\s]+@[^@\s]+\.[^@\s]+"
USERNAME_PATTERN = r"[a-zA-Z0-9]*"
USERNAME_MIN_LENGTH = 10
PASSWORD_MIN_LENGTH = 8


USER_CREATION_RULES = RuleSet(
    UserCreationRequest,
    (
        not_null("email", "'Email' must not be empty."),
        matches(
            "email", EMAIL_PATTERN,
            "The format of the ‘Email’ value is incorrect.",
        ),
        not_null("username", "'Username' must not be empty."),
        matches(
            "username", USERNAME_PATTERN,
            "The format of the ‘Username’ value is incorrect.",
        ),
        min_length(
            "username", USERNAME_MIN_LENGTH,
            f"The username must be at least {USERNAME_MIN_LENGTH} characters long.",
        ),
        not_null("password", "'Password' must not be empty."),
        min_length(
            "password", PASSWORD_MIN_LENGTH,
            f"The password must be at least {PASSWORD_MIN_LENGTH} characters long.",
        ),
        contains(
            "password", r"[A-Z]",
            "The password must contain at least one uppercase letter.",
        ),
        contains(
            "password", r"\d",
            "The password must contain at least one number.",
        ),
    ),
)


def build_default_registry() -> ValidatorRegistry:
    registry = ValidatorRegistry()
    registry.register(USER_CREATION_RULES)
    return registry


default_registry = build_default_registry()
