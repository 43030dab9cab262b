"""Pattern expressions.

A pattern is a closed set of immutable variants. Patterns carry no
matching behaviour of their own; ``treequery.core.unify`` dispatches
on the variant.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any as AnyValue


class Pattern:
    """Base class for patterns."""

    __slots__ = ()

    def __and__(self, other: Pattern) -> Pattern:
        return And(self, other)

    def __or__(self, other: Pattern) -> Pattern:
        return Or(self, other)

    def __invert__(self) -> Pattern:
        return Not(self)


@dataclass(frozen=True)
class Any(Pattern):
    """Matches anything."""


@dataclass(frozen=True)
class Bind(Pattern):
    """Matches if ``pattern`` matches, binding the matched value to ``name``."""

    name: str
    pattern: Pattern


@dataclass(frozen=True)
class Or(Pattern):
    """Tries ``left``; if it fails, tries ``right``."""

    left: Pattern
    right: Pattern


@dataclass(frozen=True)
class And(Pattern):
    """Matches if both patterns match the same value."""

    left: Pattern
    right: Pattern


@dataclass(frozen=True)
class Not(Pattern):
    """Matches if ``pattern`` doesn't.

    Any bindings made inside ``pattern`` are lost.
    """

    pattern: Pattern


@dataclass(frozen=True)
class Satisfy(Pattern):
    """Matches if the value satisfies the predicate."""

    predicate: Callable[[AnyValue], bool]

    def __repr__(self) -> str:
        name = getattr(self.predicate, "__qualname__", None) or repr(self.predicate)
        return f"Satisfy({name})"


@dataclass(frozen=True)
class Array(Pattern):
    """Matches a sequence element-wise."""

    patterns: Sequence[Pattern]

    def __post_init__(self) -> None:
        object.__setattr__(self, "patterns", tuple(self.patterns))


@dataclass(frozen=True)
class Record(Pattern):
    """Partially matches a record value.

    Fields of the value that are not named in ``pairs`` are ignored.
    """

    pairs: Mapping[str, Pattern] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairs", MappingProxyType(dict(self.pairs)))

    def __repr__(self) -> str:
        return f"Record({dict(self.pairs)!r})"


def eq(expected: AnyValue) -> Satisfy:
    """Pattern matching values equal to ``expected``.

    Booleans and numbers never compare equal to each other.
    """

    def _equals(value: AnyValue) -> bool:
        if isinstance(value, bool) != isinstance(expected, bool):
            return False
        return value == expected

    _equals.__qualname__ = f"eq({expected!r})"
    return Satisfy(_equals)


def is_instance(*types: type) -> Satisfy:
    """Pattern matching values that are instances of any of ``types``."""

    def _check(value: AnyValue) -> bool:
        return isinstance(value, types)

    _check.__qualname__ = f"is_instance({', '.join(t.__name__ for t in types)})"
    return Satisfy(_check)
