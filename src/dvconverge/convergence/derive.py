"""Routing tables from converged engine state."""

from __future__ import annotations

from dataclasses import dataclass

from dvconverge.types import UNREACHABLE, Cost, Unreachable

from .engine import EngineState


@dataclass(frozen=True)
class RoutingEntry:
    """Forwarding entry: where to send traffic for ``destination``."""

    destination: str
    next_hop: str | Unreachable
    cost: Cost

    @property
    def reachable(self) -> bool:
        return not isinstance(self.next_hop, Unreachable)

    def as_line(self) -> str:
        """``destination,next_hop,cost`` with ``INF`` for unreachable parts."""
        return f"{self.destination},{self.next_hop},{self.cost}"


class RoutingTableDeriver:
    """Read-only view turning converged best estimates into routing tables.

    The tie-break was already applied when each round chose its best via;
    the deriver only copies those choices out.
    """

    def __init__(self, state: EngineState):
        self._state = state

    def table_for(self, source: str) -> tuple[RoutingEntry, ...]:
        """Routing entries of ``source``, destinations in name order."""
        entries = []
        for destination in self._state.index:
            if destination == source:
                continue
            estimate = self._state.estimate(source, destination)
            if estimate.via is None:
                entries.append(RoutingEntry(destination, UNREACHABLE, UNREACHABLE))
            else:
                entries.append(RoutingEntry(destination, estimate.via, estimate.cost))
        return tuple(entries)

    def derive(self) -> dict[str, tuple[RoutingEntry, ...]]:
        return {source: self.table_for(source) for source in self._state.index}


def derive_routing_tables(state: EngineState) -> dict[str, tuple[RoutingEntry, ...]]:
    """Per-source routing tables for a converged state."""
    return RoutingTableDeriver(state).derive()


__all__ = [
    "RoutingEntry",
    "RoutingTableDeriver",
    "derive_routing_tables",
]
