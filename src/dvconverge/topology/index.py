"""Alphabetical name <-> position table for deterministic iteration."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .graph import NetworkGraph


class CostIndex:
    """Immutable bijection between node names and sorted positions.

    A new index is built whenever the node set changes. Positions are only
    meaningful within one index; anything carried across a rebuild must be
    keyed by name.
    """

    __slots__ = ("_names", "_positions")

    def __init__(self, names: Iterable[str]) -> None:
        self._names: tuple[str, ...] = tuple(sorted(set(names)))
        self._positions: dict[str, int] = {name: i for i, name in enumerate(self._names)}

    @classmethod
    def from_graph(cls, graph: NetworkGraph) -> CostIndex:
        """Build an index over a graph's current node set."""
        return cls(graph.nodes)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def position(self, name: str) -> int:
        """Position of ``name``; raises KeyError for unknown names."""
        return self._positions[name]

    def name_at(self, position: int) -> str:
        return self._names[position]

    def shared_names(self, other: CostIndex) -> tuple[str, ...]:
        """Names present in both indices, in ascending order."""
        return tuple(name for name in self._names if name in other)

    def __contains__(self, name: object) -> bool:
        return name in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostIndex):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"CostIndex({list(self._names)!r})"


__all__ = [
    "CostIndex",
]
