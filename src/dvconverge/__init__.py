"""
dvconverge -- Round-synchronous distance-vector routing simulation.

Bellman-Ford relaxation over named routers | Deterministic tie-breaks |
Warm-started re-convergence after topology updates

Minimal dependencies (NumPy). Pure Python.
"""

from dvconverge._version import __version__
from dvconverge.config import EngineConfig
from dvconverge.convergence import (
    ConvergenceResult,
    RelaxationEngine,
    RoundSnapshot,
    RoutingEntry,
    RoutingTableDeriver,
    TopologyUpdater,
    apply_updates,
    derive_routing_tables,
    run_to_convergence,
    verify_routing_tables,
)
from dvconverge.simulation import DistanceVectorSimulation, simulate
from dvconverge.topology import CostIndex, NetworkGraph, build_initial_graph
from dvconverge.types import (
    UNREACHABLE,
    ConvergenceError,
    Cost,
    DistanceVectorError,
    Finite,
    InputFormatError,
    UnknownNodeError,
    Unreachable,
)

# NOTE: Full subpackage APIs are accessible via direct imports:
#   from dvconverge.convergence import EngineState, carry_over, shortest_distances, ...
#   from dvconverge.textio import parse_topology, format_snapshot, ...

__all__ = [
    "__version__",
    # Costs
    "Cost",
    "Finite",
    "Unreachable",
    "UNREACHABLE",
    # Errors
    "DistanceVectorError",
    "InputFormatError",
    "UnknownNodeError",
    "ConvergenceError",
    # Topology
    "NetworkGraph",
    "CostIndex",
    "build_initial_graph",
    # Convergence
    "EngineConfig",
    "RelaxationEngine",
    "RoundSnapshot",
    "ConvergenceResult",
    "run_to_convergence",
    "RoutingEntry",
    "RoutingTableDeriver",
    "derive_routing_tables",
    "TopologyUpdater",
    "apply_updates",
    "verify_routing_tables",
    # Simulation
    "DistanceVectorSimulation",
    "simulate",
]
