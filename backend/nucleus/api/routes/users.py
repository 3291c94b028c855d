"""User Routes — user creation guarded by rate limiting and payload validation.

Invariants:
    - Pipeline order: version check → rate limiter → body binding → validation filter → handler
    - The rate limiter is a dependency, so it runs before the body is bound
    - The handler only runs for a valid UserCreationRequest
    - No user is persisted: success is a fixed confirmation message
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from nucleus.api.rate_limit import REJECTION_MESSAGE, user_creation_limit
from nucleus.api.validation_filter import validation_filter
from nucleus.api.versioning import resolve_api_version
from nucleus.schemas.user import UserCreationRequest

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"], dependencies=[Depends(resolve_api_version)])

USER_CREATED_MESSAGE = "User created successfully."


@router.post(
    "/users",
    response_model=str,
    dependencies=[Depends(user_creation_limit)],
    status_code=status.HTTP_200_OK,
    summary="Creates a new user in the system.",
    description=(
        "This endpoint validates the incoming user data based on predefined "
        "rules and is protected by a rate limiter."
    ),
    response_description="Returns a success message if the user was created successfully.",
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "description": (
                "Returned if the provided user data is invalid "
                "(e.g., weak password, invalid email)."
            ),
        },
        status.HTTP_429_TOO_MANY_REQUESTS: {
            "description": "Returned if the client has exceeded the rate limit.",
            "content": {"text/plain": {"example": REJECTION_MESSAGE}},
        },
    },
)
@validation_filter(UserCreationRequest)
async def create_user(request: Request, body: UserCreationRequest):
    logger.info(
        f"User creation accepted for {body.username}",
        extra={"path": request.url.path},
    )
    return USER_CREATED_MESSAGE
