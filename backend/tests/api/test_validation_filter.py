"""Validation Filter — tests for the pre-handler hook in isolation.

Tests cover:
    - No payload of the guarded type → handler runs unchanged
    - Valid payload → handler result returned as-is
    - Invalid payload → handler never runs, 400 envelope with field-keyed errors
    - Sync handlers are supported
    - Missing validator fails when the route is declared
    - Handler exceptions propagate untouched
"""

import json
from dataclasses import dataclass

import pytest

from nucleus.api.validation_filter import build_rejection, validation_filter
from nucleus.core.errors import ErrorContext, ValidatorNotRegisteredError
from nucleus.core.rules import RuleSet, min_length, not_null
from nucleus.core.validator import ValidationOutcome, ValidatorRegistry


@dataclass(frozen=True)
class Widget:
    name: str | None


@dataclass(frozen=True)
class Unguarded:
    name: str


def _registry() -> ValidatorRegistry:
    registry = ValidatorRegistry()
    registry.register(RuleSet(Widget, (
        not_null("name", "name required"),
        min_length("name", 3, "name too short"),
    )))
    return registry


def _guarded(calls: list):
    @validation_filter(Widget, registry=_registry())
    async def handler(widget=None, other=None):
        calls.append((widget, other))
        return {"handled": True}
    return handler


async def test_forwards_when_no_payload_bound():
    calls = []
    handler = _guarded(calls)
    result = await handler(other=Unguarded("x"))
    assert result == {"handled": True}
    assert calls == [(None, Unguarded("x"))]


async def test_forwards_valid_payload_and_returns_result_unchanged():
    calls = []
    handler = _guarded(calls)
    widget = Widget("abcd")
    result = await handler(widget=widget)
    assert result == {"handled": True}
    assert calls == [(widget, None)]


async def test_short_circuits_invalid_payload():
    calls = []
    handler = _guarded(calls)
    response = await handler(widget=Widget("ab"))
    assert calls == []
    assert response.status_code == 400
    body = json.loads(response.body)
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["errors"] == {"name": ["name too short"]}


async def test_positional_payload_is_found():
    calls = []
    handler = _guarded(calls)
    response = await handler(Widget(None))
    assert calls == []
    assert json.loads(response.body)["error"]["errors"] == {
        "name": ["name required"],
    }


async def test_sync_handler_runs_in_threadpool():
    @validation_filter(Widget, registry=_registry())
    def handler(widget):
        return widget.name.upper()

    assert await handler(widget=Widget("abcd")) == "ABCD"


async def test_handler_exception_propagates():
    @validation_filter(Widget, registry=_registry())
    async def handler(widget):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        await handler(widget=Widget("abcd"))


def test_unregistered_type_fails_at_declaration():
    with pytest.raises(ValidatorNotRegisteredError):
        validation_filter(Unguarded, registry=_registry())


def test_wrapper_keeps_handler_identity():
    calls = []
    handler = _guarded(calls)
    assert handler.__name__ == "handler"
    assert handler.__wrapped__ is not None


def test_build_rejection_carries_context_path():
    outcome = ValidationOutcome.from_errors({"name": ["name required"]})
    response = build_rejection(outcome, ErrorContext(path="/api/v1/users"))
    body = json.loads(response.body)
    assert response.status_code == 400
    assert body["error"]["context"]["path"] == "/api/v1/users"
    assert body["error"]["category"] == "validation"
