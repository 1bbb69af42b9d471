"""Text adapters: topology input protocol and table rendering."""

from __future__ import annotations

from dvconverge.textio.display import (
    CELL_WIDTH,
    format_distance_table,
    format_routing_table,
    format_routing_tables,
    format_snapshot,
)
from dvconverge.textio.parser import (
    END,
    START,
    UPDATE,
    TopologyScript,
    parse_cost,
    parse_topology,
)

__all__ = [
    # Parser
    "START",
    "UPDATE",
    "END",
    "TopologyScript",
    "parse_cost",
    "parse_topology",
    # Display
    "CELL_WIDTH",
    "format_distance_table",
    "format_snapshot",
    "format_routing_table",
    "format_routing_tables",
]
