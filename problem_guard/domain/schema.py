"""
Field schema for merged problem records.

Each field of the record is described by a ``FieldRule`` tagged with one of
three presence rules:

- ``Required(kind)``: key must exist and hold a value of ``kind``.
- ``Nullable(kind)``: key must exist and hold ``kind`` or None.
- ``OptionalNullable(kind)``: key may be absent, MISSING, None, or ``kind``.

``MERGED_PROBLEM_SCHEMA`` lists the rules in declaration order, which is also
the order the validator checks them in.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Tuple

from problem_guard.utils.probe import MISSING


class Kind(str, enum.Enum):
    """Primitive JSON kinds a field may hold."""

    STRING = "string"
    NUMBER = "number"

    def matches(self, value: Any) -> bool:
        if self is Kind.STRING:
            return isinstance(value, str)
        # bool is an int subclass but JSON true/false are not numbers.
        return isinstance(value, (int, float)) and not isinstance(value, bool)


class Presence(str, enum.Enum):
    REQUIRED = "required"
    NULLABLE = "nullable"
    OPTIONAL_NULLABLE = "optional_nullable"


@dataclass(frozen=True)
class FieldRule:
    """
    Presence and kind rule for a single named field.
    """

    name: str
    kind: Kind
    presence: Presence
    group: str = ""

    @property
    def may_be_absent(self) -> bool:
        return self.presence is Presence.OPTIONAL_NULLABLE

    @property
    def accepts_null(self) -> bool:
        return self.presence is not Presence.REQUIRED

    def accepts(self, value: Any) -> bool:
        """
        Check a probed value (``MISSING`` when absent) against this rule.
        """
        if value is MISSING:
            return self.may_be_absent
        if value is None:
            return self.accepts_null
        return self.kind.matches(value)


def Required(name: str, kind: Kind, group: str = "") -> FieldRule:  # noqa: N802
    return FieldRule(name=name, kind=kind, presence=Presence.REQUIRED, group=group)


def Nullable(name: str, kind: Kind, group: str = "") -> FieldRule:  # noqa: N802
    return FieldRule(name=name, kind=kind, presence=Presence.NULLABLE, group=group)


def OptionalNullable(name: str, kind: Kind, group: str = "") -> FieldRule:  # noqa: N802
    return FieldRule(name=name, kind=kind, presence=Presence.OPTIONAL_NULLABLE, group=group)


Schema = Tuple[FieldRule, ...]

MERGED_PROBLEM_SCHEMA: Schema = (
    # Basic information
    Required("id", Kind.STRING, "identity"),
    Required("contest_id", Kind.STRING, "identity"),
    Required("title", Kind.STRING, "identity"),
    # First AC
    Nullable("first_user_id", Kind.STRING, "first_ac"),
    Nullable("first_contest_id", Kind.STRING, "first_ac"),
    Nullable("first_submission_id", Kind.NUMBER, "first_ac"),
    # Fastest code
    Nullable("fastest_user_id", Kind.STRING, "fastest"),
    Nullable("fastest_contest_id", Kind.STRING, "fastest"),
    Nullable("fastest_submission_id", Kind.NUMBER, "fastest"),
    Nullable("execution_time", Kind.NUMBER, "fastest"),
    # Shortest code
    Nullable("shortest_user_id", Kind.STRING, "shortest"),
    Nullable("shortest_contest_id", Kind.STRING, "shortest"),
    Nullable("shortest_submission_id", Kind.NUMBER, "shortest"),
    Nullable("source_code_length", Kind.NUMBER, "shortest"),
    # Aggregates
    Nullable("solver_count", Kind.NUMBER, "aggregate"),
    OptionalNullable("point", Kind.NUMBER, "aggregate"),
)


def field_names(schema: Schema = MERGED_PROBLEM_SCHEMA) -> list[str]:
    """Field names in declaration order."""
    return [rule.name for rule in schema]


__all__ = [
    "FieldRule",
    "Kind",
    "MERGED_PROBLEM_SCHEMA",
    "Nullable",
    "OptionalNullable",
    "Presence",
    "Required",
    "Schema",
    "field_names",
]
