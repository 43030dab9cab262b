"""Error types for the query engine."""


class QueryError(Exception):
    """Base class for treequery errors."""


class InvalidPatternError(QueryError, TypeError):
    """Something other than a pattern was handed to the engine."""

    def __init__(self, pattern: object):
        self.pattern = pattern
        super().__init__(f"Not a pattern: {pattern!r}")


class DocumentError(QueryError):
    """An input document could not be loaded."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot load {source}: {reason}")
