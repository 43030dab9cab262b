"""Immutable name -> value bindings produced by a successful match."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, eq=False)
class Bindings(Mapping[str, Any]):
    """Immutable mapping from binding names to matched values.

    Every update returns a new instance; values are shared with the
    matched input, never copied.
    """

    mapping: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mapping", MappingProxyType(dict(self.mapping)))

    @staticmethod
    def empty() -> "Bindings":
        """Create empty bindings."""
        return Bindings()

    @staticmethod
    def singleton(name: str, value: Any) -> "Bindings":
        """Create bindings with a single entry."""
        return Bindings({name: value})

    def set(self, name: str, value: Any) -> "Bindings":
        """Return new bindings with ``name`` bound to ``value``."""
        return Bindings({**self.mapping, name: value})

    def merge(self, other: Mapping[str, Any]) -> "Bindings":
        """Return the union of both bindings; entries of ``other`` win."""
        if not other:
            return self
        if not self.mapping and isinstance(other, Bindings):
            return other
        return Bindings({**self.mapping, **other})

    def __getitem__(self, name: str) -> Any:
        return self.mapping[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.mapping)

    def __len__(self) -> int:
        return len(self.mapping)

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in self.mapping.items())
        return f"Bindings({items})"

