"""
Domain package for problem_guard.

Exports the merged problem record and the field schema describing its shape.
Keep this package focused on data definitions; checking lives in
``problem_guard.validation``.
"""

from problem_guard.domain.models import MergedProblem
from problem_guard.domain.schema import (
    MERGED_PROBLEM_SCHEMA,
    FieldRule,
    Kind,
    Nullable,
    OptionalNullable,
    Presence,
    Required,
)

__all__ = [
    "FieldRule",
    "Kind",
    "MERGED_PROBLEM_SCHEMA",
    "MergedProblem",
    "Nullable",
    "OptionalNullable",
    "Presence",
    "Required",
]
