"""
problem_guard - Runtime shape guard for AtCoder merged problem records.

A merged problem is a problem entry joined with solver statistics (first
accepted submission, fastest code, shortest code, solver count, point) as
published in the upstream ``merged-problems.json`` listing. This package
provides:

- A non-raising property probe for arbitrary decoded values
- An explicit field schema (required / nullable / optional-nullable rules)
- A fail-fast shape guard and first-violation diagnostics
- A frozen typed record for values that passed the guard
- Batch checking, a rich report, and a CLI around them
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from problem_guard.config import Settings, get_settings
from problem_guard.domain.models import MergedProblem
from problem_guard.domain.schema import MERGED_PROBLEM_SCHEMA, FieldRule, Kind, Presence
from problem_guard.utils.logging import configure_logging, get_logger
from problem_guard.utils.probe import MISSING, get_property, has_property
from problem_guard.validation.guard import (
    InvalidMergedProblemError,
    ShapeViolation,
    as_merged_problem,
    find_violation,
    is_merged_problem,
    require_merged_problem,
)

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Record and schema
    "MergedProblem",
    "MERGED_PROBLEM_SCHEMA",
    "FieldRule",
    "Kind",
    "Presence",
    # Probe
    "MISSING",
    "get_property",
    "has_property",
    # Guard
    "InvalidMergedProblemError",
    "ShapeViolation",
    "as_merged_problem",
    "find_violation",
    "is_merged_problem",
    "require_merged_problem",
    # Logging
    "configure_logging",
    "get_logger",
]
