"""
Shape guard for merged problem records.

``is_merged_problem`` decides whether an arbitrary decoded value conforms to
the merged problem shape. It is a pure, fail-fast interpretation of
``MERGED_PROBLEM_SCHEMA``: the first failing field rejects the value and no
later field is inspected. It never raises; malformed input yields False.

Usage:
    import json
    from problem_guard.validation import as_merged_problem, is_merged_problem

    value = json.loads(payload)
    if is_merged_problem(value):
        problem = as_merged_problem(value)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from problem_guard.domain.models import MergedProblem
from problem_guard.domain.schema import MERGED_PROBLEM_SCHEMA, FieldRule, Schema
from problem_guard.utils.probe import MISSING, get_property, is_object

NOT_AN_OBJECT = "<value>"


@dataclass(frozen=True)
class ShapeViolation:
    """
    First check that failed for a rejected value.
    """

    field: str
    rule: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field}: {self.reason} ({self.rule})"


class InvalidMergedProblemError(ValueError):
    """Raised when a typed record is requested for a value the guard rejects."""

    def __init__(self, violation: ShapeViolation) -> None:
        super().__init__(f"value is not a merged problem: {violation}")
        self.violation = violation


def conforms(value: Any, schema: Schema) -> bool:
    """
    Return True when ``value`` satisfies every rule of ``schema``.
    """
    if not is_object(value):
        return False
    return all(rule.accepts(get_property(value, rule.name)) for rule in schema)


def is_merged_problem(value: Any) -> bool:
    """Return True when ``value`` may be treated as a merged problem record."""
    return conforms(value, MERGED_PROBLEM_SCHEMA)


def _describe(rule: FieldRule, value: Any) -> str:
    if value is MISSING:
        return "missing"
    expected = rule.kind.value
    if rule.accepts_null:
        expected += " or null"
    return f"expected {expected}, got {type(value).__name__}"


def find_violation(value: Any, schema: Schema = MERGED_PROBLEM_SCHEMA) -> Optional[ShapeViolation]:
    """
    Return the first failing check in declaration order, or None when the
    value conforms.
    """
    if not is_object(value):
        return ShapeViolation(
            field=NOT_AN_OBJECT,
            rule="object",
            reason=f"not an object, got {type(value).__name__}",
        )
    for rule in schema:
        probed = get_property(value, rule.name)
        if not rule.accepts(probed):
            return ShapeViolation(field=rule.name, rule=rule.presence.value, reason=_describe(rule, probed))
    return None


def as_merged_problem(value: Any) -> MergedProblem:
    """
    Build the typed record for ``value``.

    Raises
    ------
    InvalidMergedProblemError
        If the value does not conform to the merged problem shape.
    """
    violation = find_violation(value)
    if violation is not None:
        raise InvalidMergedProblemError(violation)
    fields = {}
    for rule in MERGED_PROBLEM_SCHEMA:
        probed = get_property(value, rule.name)
        if probed is not MISSING:
            fields[rule.name] = probed
    return MergedProblem.model_validate(fields)


def require_merged_problem(value: Any) -> Any:
    """
    Return ``value`` unchanged if it conforms, else raise
    ``InvalidMergedProblemError``.
    """
    violation = find_violation(value)
    if violation is not None:
        raise InvalidMergedProblemError(violation)
    return value


__all__ = [
    "InvalidMergedProblemError",
    "ShapeViolation",
    "as_merged_problem",
    "conforms",
    "find_violation",
    "is_merged_problem",
    "require_merged_problem",
]
