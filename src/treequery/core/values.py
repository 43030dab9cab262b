"""Classification of the runtime values the engine walks.

A value is a scalar, a sequence of values, or a record of named
fields. Records are mappings or plain objects (instance attributes or
dataclass fields), so dict trees and dataclass trees can be queried
alike.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Hashable, Iterator, Mapping, Sequence
from typing import Any

SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes, bytearray)

_MISSING = object()
_ABSENT = object()


def is_scalar(value: Any) -> bool:
    return isinstance(value, SCALAR_TYPES)


def is_sequence(value: Any) -> bool:
    """Return True for list-like containers. Strings are scalars."""
    return isinstance(value, Sequence) and not is_scalar(value)


def is_record(value: Any) -> bool:
    """Return True for anything a field lookup can be attempted on."""
    return not is_scalar(value)


def own_keys(value: Any) -> list[Hashable]:
    """Return the own field names of a record, in a stable order.

    Mappings report their keys (any hashable, not only strings),
    sequences report none, and other objects report their instance
    attributes, or their fields when they are slotted dataclasses.
    """
    match value:
        case Mapping():
            return list(value.keys())
        case _ if is_sequence(value):
            return []
        case _ if hasattr(value, "__dict__"):
            return list(vars(value))
        case _ if dataclasses.is_dataclass(value):
            return [f.name for f in dataclasses.fields(value)]
        case _:
            return []


def get_field(value: Any, name: Hashable, default: Any = _MISSING) -> Any:
    """Look up an own field of a record.

    Returns ``default`` when the field is absent; raises KeyError when
    no default was given.
    """
    match value:
        case Mapping():
            if name in value:
                return value[name]
        case _ if is_sequence(value):
            pass
        case _ if hasattr(value, "__dict__"):
            fields = vars(value)
            if name in fields:
                return fields[name]
        case _ if name in own_keys(value):
            return getattr(value, name)
    if default is _MISSING:
        raise KeyError(name)
    return default


def has_field(value: Any, name: Hashable) -> bool:
    return get_field(value, name, _ABSENT) is not _ABSENT


def children(value: Any) -> Iterator[Any]:
    """Return an iterator over the direct children of a container."""
    if is_sequence(value):
        return iter(value)
    if is_record(value):
        return (get_field(value, key) for key in own_keys(value))
    return iter(())
