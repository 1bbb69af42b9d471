"""Text rendering of distance and routing tables."""

from __future__ import annotations

from collections.abc import Sequence

from dvconverge.convergence import DistanceTable, RoundSnapshot, RoutingEntry

CELL_WIDTH = 5


def _line(cells: Sequence[str]) -> str:
    return "".join(cell.ljust(CELL_WIDTH) for cell in cells).rstrip()


def format_distance_table(table: DistanceTable, round_number: int) -> str:
    """Render one router's distance table.

    Header row lists destinations; each following row is one neighbour used
    as via, with ``INF`` for unreachable costs.
    """
    lines = [
        f"Distance Table of router {table.source} at t={round_number}:",
        _line(["", *table.destinations]),
    ]
    for via in table.vias:
        lines.append(_line([via, *(str(table.cost(via, d)) for d in table.destinations)]))
    return "\n".join(lines) + "\n"


def format_snapshot(snapshot: RoundSnapshot) -> str:
    """All routers' distance tables for one round, blank line after each."""
    return "\n".join(
        format_distance_table(snapshot.tables[source], snapshot.round)
        for source in sorted(snapshot.tables)
    ) + "\n"


def format_routing_table(source: str, entries: Sequence[RoutingEntry]) -> str:
    """Render ``destination,next_hop,cost`` lines for one router."""
    lines = [f"Routing Table of router {source}:"]
    lines.extend(entry.as_line() for entry in entries)
    return "\n".join(lines) + "\n"


def format_routing_tables(tables: dict[str, tuple[RoutingEntry, ...]]) -> str:
    """All routers' routing tables, blank line after each."""
    return "\n".join(format_routing_table(source, tables[source]) for source in sorted(tables)) + "\n"


__all__ = [
    "CELL_WIDTH",
    "format_distance_table",
    "format_snapshot",
    "format_routing_table",
    "format_routing_tables",
]
