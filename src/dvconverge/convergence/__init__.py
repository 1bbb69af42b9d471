"""Distance-vector convergence engine.

Implements:

- RelaxationEngine: double-buffered synchronous Bellman-Ford rounds.
- RoutingTableDeriver: routing tables from converged estimates.
- TopologyUpdater: update batches with warm-start carry-over.
- Reference check: numpy all-pairs shortest paths to validate results.

Example::

    from dvconverge.convergence import derive_routing_tables, run_to_convergence
    from dvconverge.topology import build_initial_graph

    graph = build_initial_graph("ABC", [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
    result = run_to_convergence(graph)
    tables = derive_routing_tables(result.state)
"""

from __future__ import annotations

from dvconverge.convergence.derive import (
    RoutingEntry,
    RoutingTableDeriver,
    derive_routing_tables,
)
from dvconverge.convergence.engine import (
    NO_PATH,
    BestEstimate,
    ConvergenceResult,
    DistanceTable,
    EngineState,
    RelaxationEngine,
    RoundSnapshot,
    run_to_convergence,
    select_best,
)
from dvconverge.convergence.reference import (
    shortest_distances,
    verify_routing_tables,
)
from dvconverge.convergence.updater import (
    CarryOver,
    Edit,
    TopologyUpdater,
    apply_updates,
    carry_over,
    worsened_links,
)

__all__ = [
    # Engine
    "BestEstimate",
    "NO_PATH",
    "EngineState",
    "DistanceTable",
    "RoundSnapshot",
    "ConvergenceResult",
    "select_best",
    "RelaxationEngine",
    "run_to_convergence",
    # Routing tables
    "RoutingEntry",
    "RoutingTableDeriver",
    "derive_routing_tables",
    # Updates
    "Edit",
    "apply_updates",
    "worsened_links",
    "CarryOver",
    "carry_over",
    "TopologyUpdater",
    # Reference
    "shortest_distances",
    "verify_routing_tables",
]
