"""
Validation package for problem_guard.

Re-exports the shape guard and its diagnostics so callers can import from
``problem_guard.validation`` directly.
"""

from problem_guard.validation.guard import (
    InvalidMergedProblemError,
    ShapeViolation,
    as_merged_problem,
    conforms,
    find_violation,
    is_merged_problem,
    require_merged_problem,
)

__all__ = [
    "InvalidMergedProblemError",
    "ShapeViolation",
    "as_merged_problem",
    "conforms",
    "find_violation",
    "is_merged_problem",
    "require_merged_problem",
]
