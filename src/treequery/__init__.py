"""Structural pattern matching and search over tree-shaped values."""

from loguru import logger

from treequery.core import (
    And,
    Any,
    Array,
    Bind,
    Bindings,
    DocumentError,
    InvalidPatternError,
    Not,
    Or,
    Pattern,
    QueryError,
    Record,
    Satisfy,
    Search,
    eq,
    is_instance,
    matches,
    search,
    search_all,
    search_first,
    unify,
)

logger.disable("treequery")

__all__ = [
    "And",
    "Any",
    "Array",
    "Bind",
    "Bindings",
    "DocumentError",
    "InvalidPatternError",
    "Not",
    "Or",
    "Pattern",
    "QueryError",
    "Record",
    "Satisfy",
    "Search",
    "eq",
    "is_instance",
    "matches",
    "search",
    "search_all",
    "search_first",
    "unify",
]
