from __future__ import annotations

import pickle
from types import SimpleNamespace

import pytest

from problem_guard.utils.probe import MISSING, get_property, has_property, is_object


class _Slotted:
    __slots__ = ("id",)

    def __init__(self) -> None:
        self.id = "abc_1"


class _TaggedList(list):
    pass


@pytest.mark.parametrize("value", [None, 0, 1.5, True, "id", b"id", MISSING])
def test_primitives_and_null_carry_no_properties(value):
    assert not is_object(value)
    assert has_property(value, "id") is False
    assert get_property(value, "id") is MISSING


def test_mapping_keys_are_properties():
    value = {"id": "abc_1", "point": None}
    assert has_property(value, "id")
    assert has_property(value, "point")
    assert not has_property(value, "title")
    assert get_property(value, "point") is None
    assert get_property(value, "title") is MISSING


def test_instance_attributes_are_properties():
    value = SimpleNamespace(id="abc_1")
    assert has_property(value, "id")
    assert get_property(value, "id") == "abc_1"


def test_methods_and_slots_are_not_own_properties():
    assert not has_property({}, "keys")
    assert not has_property(_Slotted(), "id")


def test_list_passes_object_check_but_has_no_named_properties():
    assert is_object([])
    assert not has_property(["id"], "id")

    tagged = _TaggedList()
    tagged.id = "abc_1"
    assert has_property(tagged, "id")


def test_missing_is_a_falsy_singleton():
    assert not MISSING
    assert repr(MISSING) == "MISSING"
    assert type(MISSING)() is MISSING
    assert pickle.loads(pickle.dumps(MISSING)) is MISSING


class _RaisingHook:
    __slots__ = ()

    def __getattr__(self, name):
        raise RuntimeError(f"hook ran for {name}")


def test_attribute_hooks_are_never_run():
    value = _RaisingHook()
    assert is_object(value)
    assert has_property(value, "id") is False
    assert get_property(value, "id") is MISSING


def test_class_attributes_are_not_properties():
    class Shaped:
        id = "abc_1"

    assert not has_property(dict, "keys")
    assert not has_property(Shaped, "id")
    assert has_property(Shaped(), "id") is False
