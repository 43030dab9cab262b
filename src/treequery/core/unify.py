"""Structural unification of values against patterns."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any as AnyValue

from treequery.core.bindings import Bindings
from treequery.core.errors import InvalidPatternError
from treequery.core.pattern import And, Any, Array, Bind, Not, Or, Pattern, Record, Satisfy
from treequery.core.values import get_field, has_field, is_record, is_sequence


def unify(value: AnyValue, pattern: Pattern) -> Bindings | None:
    """Unify a value with a pattern.

    Args:
        value: Value to match (scalar, sequence or record, possibly cyclic)
        pattern: Pattern to match against

    Returns:
        The bindings made by the pattern, or None if it doesn't match.

    Raises:
        InvalidPatternError: If ``pattern`` is not a Pattern
    """
    match pattern:
        case Any():
            return Bindings.empty()

        case Bind(name, inner):
            bindings = unify(value, inner)
            if bindings is None:
                return None
            return bindings.set(name, value)

        case Or(left, right):
            bindings = unify(value, left)
            if bindings is not None:
                return bindings
            return unify(value, right)

        case And(left, right):
            left_bindings = unify(value, left)
            if left_bindings is None:
                return None
            right_bindings = unify(value, right)
            if right_bindings is None:
                return None
            return left_bindings.merge(right_bindings)

        case Not(inner):
            if unify(value, inner) is None:
                return Bindings.empty()
            return None

        case Satisfy(predicate):
            if predicate(value):
                return Bindings.empty()
            return None

        case Array(patterns):
            if not is_sequence(value) or len(value) > len(patterns):
                return None
            # Patterns past the end of the value are never consulted.
            return _unify_all(zip(value, patterns))

        case Record(pairs):
            if not is_record(value):
                return None
            return _unify_fields(value, pairs.items())

        case _:
            raise InvalidPatternError(pattern)


def matches(value: AnyValue, pattern: Pattern) -> bool:
    """Return True if ``value`` matches ``pattern``."""
    return unify(value, pattern) is not None


def _unify_all(pairs: Iterable[tuple[AnyValue, Pattern]]) -> Bindings | None:
    result = Bindings.empty()
    for item, pattern in pairs:
        bindings = unify(item, pattern)
        if bindings is None:
            return None
        result = result.merge(bindings)
    return result


def _unify_fields(value: AnyValue, pairs: Iterable[tuple[Hashable, Pattern]]) -> Bindings | None:
    result = Bindings.empty()
    for name, pattern in pairs:
        if not has_field(value, name):
            return None
        bindings = unify(get_field(value, name), pattern)
        if bindings is None:
            return None
        result = result.merge(bindings)
    return result
