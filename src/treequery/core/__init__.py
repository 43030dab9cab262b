"""Core engine: patterns, unification and search."""

from treequery.core.bindings import Bindings
from treequery.core.errors import DocumentError, InvalidPatternError, QueryError
from treequery.core.pattern import (
    And,
    Any,
    Array,
    Bind,
    Not,
    Or,
    Pattern,
    Record,
    Satisfy,
    eq,
    is_instance,
)
from treequery.core.search import Search, search, search_all, search_first
from treequery.core.unify import matches, unify

__all__ = [
    # Patterns
    "Pattern",
    "Any",
    "Bind",
    "Or",
    "And",
    "Not",
    "Satisfy",
    "Array",
    "Record",
    "eq",
    "is_instance",
    # Matching
    "Bindings",
    "unify",
    "matches",
    "Search",
    "search",
    "search_first",
    "search_all",
    # Errors
    "QueryError",
    "InvalidPatternError",
    "DocumentError",
]
