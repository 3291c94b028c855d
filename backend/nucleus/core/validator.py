"""Validator Engine — evaluates a RuleSet against one payload and aggregates failures.

Invariants:
    - Every rule runs; failures are aggregated per field in declaration order
    - A None field reports only its required rule and skips the field's other rules
    - validate() never raises for a payload of the declared type
    - ValidationOutcome is immutable; a fresh one is produced per call

Design Decisions:
    - Validators keyed by payload type in a registry resolved once per route
      (at declaration time, not per request)
    - Field grouping precomputed in Validator.__init__: validate() only walks tuples
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from nucleus.core.errors import ValidatorNotRegisteredError
from nucleus.core.rules import Rule, RuleSet


@dataclass(frozen=True)
class ValidationOutcome:
    """Valid when `errors` is empty, otherwise field -> ordered messages."""
    errors: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({}),
    )

    @classmethod
    def from_errors(cls, errors: dict[str, list[str]]) -> "ValidationOutcome":
        return cls(MappingProxyType({
            name: tuple(messages) for name, messages in errors.items()
        }))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(messages) for name, messages in self.errors.items()}


def _evaluate_field(rules: tuple[Rule, ...], value: Any) -> list[str]:
    if value is None:
        for rule in rules:
            if rule.required and not rule.check(value):
                return [rule.message]
        return []
    return [
        rule.message for rule in rules if not rule.check(value)
    ]


class Validator:
    """Runs one payload type's RuleSet. Stateless after construction."""

    def __init__(self, rule_set: RuleSet):
        self.rule_set = rule_set
        self._fields = tuple(
            (name, rule_set.rules_for(name)) for name in rule_set.fields
        )

    @property
    def payload_type(self) -> type:
        return self.rule_set.payload_type

    def validate(self, payload: Any) -> ValidationOutcome:
        """Evaluate every rule against `payload`.

        Raises TypeError when `payload` is not the declared type; that is a
        wiring defect, not a validation failure.
        """
        if not isinstance(payload, self.payload_type):
            raise TypeError(
                f"{type(self).__name__} for {self.payload_type.__name__} "
                f"cannot validate {type(payload).__name__}"
            )
        errors: dict[str, list[str]] = {}
        for name, rules in self._fields:
            messages = _evaluate_field(rules, getattr(payload, name, None))
            if messages:
                errors[name] = messages
        return ValidationOutcome.from_errors(errors)


class ValidatorRegistry:
    """Type-keyed lookup of validators."""

    def __init__(self):
        self._validators: dict[type, Validator] = {}

    def register(self, rule_set: RuleSet) -> Validator:
        validator = Validator(rule_set)
        self._validators[rule_set.payload_type] = validator
        return validator

    def resolve(self, payload_type: type) -> Validator:
        try:
            return self._validators[payload_type]
        except KeyError:
            raise ValidatorNotRegisteredError(payload_type) from None

    def __contains__(self, payload_type: type) -> bool:
        return payload_type in self._validators
