"""
Utilities package for problem_guard.

Exports shared helpers for logging and property probing.
Keep this package lightweight and free of domain-specific logic.
"""

from problem_guard.utils.logging import configure_logging, get_logger
from problem_guard.utils.probe import MISSING, get_property, has_property, is_object

__all__ = [
    "configure_logging",
    "get_logger",
    "MISSING",
    "get_property",
    "has_property",
    "is_object",
]
