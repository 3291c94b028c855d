"""Declarative Rules — field-level predicates with fixed failure messages.

Invariants:
    - A Rule is (field, predicate, message); predicates are pure; only required predicates see None
    - A required rule is the null check for its field; at most one is reported per field
    - RuleSet keeps rules in declaration order and is immutable once built

Design Decisions:
    - Ordered tuple of frozen Rule objects over a fluent builder: built once at import,
      shared across requests without copying
    - Regex rules compile their pattern eagerly so a bad pattern fails at startup
"""

import re
from dataclasses import dataclass
from typing import Any, Callable


Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class Rule:
    """A single constraint on one payload field."""
    field: str
    predicate: Predicate
    message: str
    required: bool = False

    def check(self, value: Any) -> bool:
        return self.predicate(value)


@dataclass(frozen=True)
class RuleSet:
    """Every rule declared for one payload type."""
    payload_type: type
    rules: tuple[Rule, ...]

    @property
    def fields(self) -> tuple[str, ...]:
        """Fields in the order their first rule was declared."""
        return tuple(dict.fromkeys(rule.field for rule in self.rules))

    def rules_for(self, field_name: str) -> tuple[Rule, ...]:
        return tuple(rule for rule in self.rules if rule.field == field_name)


# ─── Rule factories ──────────────────────────────────────────────

def not_null(field_name: str, message: str) -> Rule:
    return Rule(field_name, lambda value: value is not None, message, required=True)


def matches(field_name: str, pattern: str, message: str) -> Rule:
    """Whole value must match `pattern`."""
    compiled = re.compile(pattern)
    return Rule(
        field_name,
        lambda value: compiled.fullmatch(str(value)) is not None,
        message,
    )


def contains(field_name: str, pattern: str, message: str) -> Rule:
    """Some part of the value must match `pattern`."""
    compiled = re.compile(pattern)
    return Rule(
        field_name,
        lambda value: compiled.search(str(value)) is not None,
        message,
    )


def min_length(field_name: str, length: int, message: str) -> Rule:
    return Rule(field_name, lambda value: len(value) >= length, message)
