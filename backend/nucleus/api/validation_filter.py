"""Validation Filter — generic pre-handler hook that rejects invalid payloads.

Invariants:
    - The validator is resolved when the route is declared, never per request
    - The first bound argument of the payload type is validated; none -> pass-through
    - Valid -> the handler runs and its result is returned unchanged
    - Invalid -> the handler never runs; a 400 envelope with field-keyed errors is returned
    - No exceptions caught, no request or payload mutation, no state between calls

Design Decisions:
    - Decorator over endpoint functions: bound arguments are the handler's keyword
      arguments, and route dependencies (version check, rate limiter) have already run
    - functools.wraps keeps the handler signature visible to FastAPI's binder
"""

import functools
import inspect
import logging
from typing import Any, Callable, Iterable

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from nucleus.core.errors import ErrorContext, PayloadValidationError
from nucleus.core.rule_sets import default_registry
from nucleus.core.validator import ValidationOutcome, ValidatorRegistry

logger = logging.getLogger(__name__)


def _first_of_type(values: Iterable[Any], wanted: type) -> Any | None:
    return next((v for v in values if isinstance(v, wanted)), None)


def build_rejection(
    outcome: ValidationOutcome, context: ErrorContext | None = None,
) -> JSONResponse:
    """Render an invalid outcome as the 400 error envelope."""
    error = PayloadValidationError(outcome.to_dict(), context)
    return JSONResponse(status_code=error.http_status, content=error.to_response())


def validation_filter(
    payload_type: type, registry: ValidatorRegistry | None = None,
) -> Callable:
    """Guard an endpoint with the validator registered for `payload_type`."""
    validator = (registry or default_registry).resolve(payload_type)

    def decorator(endpoint: Callable) -> Callable:
        is_async = inspect.iscoroutinefunction(endpoint)

        async def call_next(*args, **kwargs):
            if is_async:
                return await endpoint(*args, **kwargs)
            return await run_in_threadpool(endpoint, *args, **kwargs)

        @functools.wraps(endpoint)
        async def wrapper(*args, **kwargs):
            bound = (*args, *kwargs.values())
            payload = _first_of_type(bound, payload_type)
            if payload is None:
                return await call_next(*args, **kwargs)

            outcome = validator.validate(payload)
            if outcome.is_valid:
                return await call_next(*args, **kwargs)

            request = _first_of_type(bound, Request)
            path = request.url.path if request is not None else None
            version = (
                getattr(request.state, "api_version", None)
                if request is not None else None
            )
            context = ErrorContext(
                path=path, api_version=str(version) if version else None,
            )
            logger.info(
                f"Rejected {payload_type.__name__}: {sorted(outcome.errors)}",
                extra={
                    "payload_type": payload_type.__name__,
                    "field_count": len(outcome.errors),
                    "path": path,
                },
            )
            return build_rejection(outcome, context)

        return wrapper

    return decorator
