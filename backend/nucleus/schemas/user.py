"""User Schemas — payload bound from the user-creation request body.

Invariants:
    - UserCreationRequest is immutable (frozen) once bound
    - All three fields are required at binding time; missing ones are binding errors
    - Content rules (format, length) live in core/rule_sets.py, not here

Design Decisions:
    - Pydantic only checks presence and type: content rules are declared once,
      aggregated per field, and rendered by the validation filter
"""

from pydantic import BaseModel, ConfigDict, Field


class UserCreationRequest(BaseModel):
    """Data required to create a new user."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(
        description="Desired username. Letters and digits only, at least 10 characters.",
        examples=["johndoe123"],
    )
    email: str = Field(
        description="The user's email address.",
        examples=["john.doe@example.com"],
    )
    password: str = Field(
        description="At least 8 characters with one uppercase letter and one number.",
        examples=["Password123"],
    )
