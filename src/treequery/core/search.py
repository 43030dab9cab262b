"""Cycle-safe recursive search for pattern matches."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Any as AnyValue

from loguru import logger

from treequery.core.bindings import Bindings
from treequery.core.pattern import Pattern
from treequery.core.unify import unify
from treequery.core.values import children, is_scalar


class Search:
    """Lazy depth-first stream of the bindings found under a value.

    The root is tried first, then the elements of a sequence in index
    order or the fields of a record in key order, each subtree fully
    before the next sibling. Containers are visited at most once per
    search (by identity), so cyclic and shared structure terminates and
    yields no duplicates. Nothing is traversed beyond what the consumer
    pulls.

    A Search is single-pass; call ``search`` again to start over.
    """

    def __init__(self, value: AnyValue, pattern: Pattern):
        self.pattern = pattern
        self.matches = 0
        self._stack: list[Iterator[AnyValue]] = [iter((value,))]
        # id -> container; holding the reference keeps ids from being reused
        self._seen: dict[int, AnyValue] = {}
        self._started = False
        self._finished = False

    @property
    def visited(self) -> int:
        """Number of containers visited so far."""
        return len(self._seen)

    def __iter__(self) -> "Search":
        return self

    def __next__(self) -> Bindings:
        if not self._started:
            self._started = True
            logger.debug("search.start pattern={}", self.pattern)

        while self._stack:
            try:
                node = next(self._stack[-1])
            except StopIteration:
                self._stack.pop()
                continue

            if not is_scalar(node):
                if id(node) in self._seen:
                    logger.trace("search.skip visited={}", type(node).__name__)
                    continue
                self._seen[id(node)] = node
                self._stack.append(children(node))

            bindings = unify(node, self.pattern)
            if bindings is not None:
                self.matches += 1
                return bindings

        if not self._finished:
            self._finished = True
            logger.debug("search.done visited={} matches={}", self.visited, self.matches)
        raise StopIteration


def search(value: AnyValue, pattern: Pattern) -> Search:
    """Search ``value`` and everything reachable from it for ``pattern``.

    Returns:
        A lazy iterator of bindings, one per matching node.
    """
    return Search(value, pattern)


def search_first(value: AnyValue, pattern: Pattern) -> Bindings | None:
    """Return the bindings of the first match, traversing no further."""
    return next(search(value, pattern), None)


def search_all(value: AnyValue, pattern: Pattern, limit: int | None = None) -> list[Bindings]:
    """Collect the matches of a search, at most ``limit`` of them."""
    return list(islice(search(value, pattern), limit))
