"""Tests for value classification."""

import enum
from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from treequery.core.values import children, get_field, has_field, is_record, is_scalar, is_sequence, own_keys


@dataclass
class Node:
    kind: str
    child: object = None


@dataclass(slots=True)
class Slotted:
    kind: str


@pytest.mark.parametrize("value", [None, True, 1, 1.5, "abc", b"abc"])
def test_scalars(value) -> None:
    assert is_scalar(value)
    assert not is_sequence(value)
    assert not is_record(value)


def test_sequences() -> None:
    assert is_sequence([1, 2])
    assert is_sequence((1, 2))
    assert not is_sequence({"a": 1})
    assert not is_sequence("ab")


def test_records() -> None:
    assert is_record({})
    assert is_record(Node("a"))
    assert is_record([])


def test_own_keys() -> None:
    sym = object()
    assert own_keys({"a": 1, sym: 2}) == ["a", sym]
    assert own_keys([1, 2]) == []
    assert own_keys(Node("a")) == ["kind", "child"]
    assert own_keys(Slotted("a")) == ["kind"]
    assert own_keys(SimpleNamespace(x=1)) == ["x"]


def test_get_field() -> None:
    assert get_field({"a": 1}, "a") == 1
    assert get_field(Node("a"), "kind") == "a"
    assert get_field(Slotted("s"), "kind") == "s"
    assert get_field({"a": None}, "a") is None
    assert get_field({}, "a", "missing") == "missing"
    with pytest.raises(KeyError):
        get_field({}, "a")


def test_has_field() -> None:
    assert has_field({"a": None}, "a")
    assert not has_field({"a": 1}, "b")
    assert not has_field([1], "0")
    assert not has_field(Node("a"), "__class__")


def test_children() -> None:
    assert list(children([1, 2])) == [1, 2]
    assert list(children({"a": 1, "b": [2]})) == [1, [2]]
    assert list(children(Node("a", 3))) == ["a", 3]
    assert list(children(5)) == []


class Color(enum.Enum):
    RED = 1
    GREEN = 2


class Config:
    kind = "static"


def test_get_field_reads_instance_dict_not_descriptors() -> None:
    assert get_field(Config, "kind") == "static"
    # class-level descriptors are returned as stored, never invoked
    assert not isinstance(get_field(type, "__abstractmethods__"), frozenset)


def test_children_of_class_objects() -> None:
    assert "static" in list(children(Config))
    assert list(children(type))
