"""
Safe property probing for decoded values.

Decoded JSON arrives as plain Python values (dict, list, str, int, float,
bool, None). The helpers here answer "does this value carry a property with
this name?" without raising, whatever the value is. Mappings carry keys;
any other non-primitive object carries its instance attributes.

Usage:
    from problem_guard.utils.probe import MISSING, get_property, has_property

    has_property({"id": "abc_1"}, "id")  # True
    has_property(None, "id")  # False
    get_property({}, "point") is MISSING  # True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final


class _MissingType:
    """Sentinel type for a property that is absent or unassigned."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _MissingType()

# Values of these types never carry named properties.
PRIMITIVE_TYPES: Final = (str, bytes, bytearray, int, float, bool)


def is_object(value: Any) -> bool:
    """
    Return True when the value is of a kind that may carry named properties.

    Lists are deliberately not rejected here; they simply fail the probe
    unless they carry matching instance attributes.
    """
    return value is not None and value is not MISSING and not isinstance(value, PRIMITIVE_TYPES)


def _own_properties(value: Any) -> Mapping[str, Any] | None:
    if isinstance(value, Mapping):
        return value
    # Class attributes and methods are not own properties.
    if isinstance(value, type):
        return None
    # Bypasses __getattr__ so user hooks never run.
    try:
        attrs = object.__getattribute__(value, "__dict__")
    except AttributeError:
        return None
    if isinstance(attrs, dict):
        return attrs
    return None


def has_property(value: Any, name: str) -> bool:
    """Return True iff ``value`` carries a property called ``name``."""
    if not is_object(value):
        return False
    props = _own_properties(value)
    return props is not None and name in props


def get_property(value: Any, name: str) -> Any:
    """Return the property value, or ``MISSING`` when it is not present."""
    if not has_property(value, name):
        return MISSING
    return _own_properties(value)[name]  # type: ignore[index]


__all__ = [
    "MISSING",
    "PRIMITIVE_TYPES",
    "get_property",
    "has_property",
    "is_object",
]
