"""End-to-end simulation: initial convergence, then one update batch.

The round counter is owned by the simulation object and threaded through
each run; the update run continues numbering where the initial run stopped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from dvconverge.config import EngineConfig
from dvconverge.convergence import (
    ConvergenceResult,
    RoutingEntry,
    TopologyUpdater,
    derive_routing_tables,
    run_to_convergence,
)
from dvconverge.convergence.updater import Edit
from dvconverge.topology import NetworkGraph, build_initial_graph

logger = logging.getLogger(__name__)

RoutingTables = dict[str, tuple[RoutingEntry, ...]]


@dataclass
class Phase:
    """One convergence run and the routing tables derived from it."""

    result: ConvergenceResult
    routing_tables: RoutingTables


@dataclass
class SimulationReport:
    """Initial phase plus the optional update phase."""

    initial: Phase
    update: Phase | None = None

    @property
    def phases(self) -> list[Phase]:
        return [self.initial] if self.update is None else [self.initial, self.update]


class DistanceVectorSimulation:
    """
    Drives a graph through convergence and topology updates.

    Usage:
        sim = DistanceVectorSimulation(graph)
        first = sim.converge()
        second = sim.update([("B", "C", -1)])
    """

    def __init__(self, graph: NetworkGraph, config: EngineConfig | None = None):
        self._graph = graph
        self._config = config or EngineConfig()
        self._updater = TopologyUpdater(self._config)
        self._next_round = 0
        self._last: ConvergenceResult | None = None

    @property
    def graph(self) -> NetworkGraph:
        return self._graph

    @property
    def next_round(self) -> int:
        return self._next_round

    @property
    def last_result(self) -> ConvergenceResult | None:
        return self._last

    def _finish(self, result: ConvergenceResult) -> Phase:
        self._last = result
        self._next_round = result.next_round
        return Phase(result=result, routing_tables=derive_routing_tables(result.state))

    def converge(self) -> Phase:
        """Cold-start convergence on the current graph."""
        result = run_to_convergence(self._graph, self._config, start_round=self._next_round)
        return self._finish(result)

    def update(self, edits: Iterable[Edit]) -> Phase:
        """Apply an update batch and re-converge."""
        if self._last is None:
            raise RuntimeError("converge() must run before update()")
        result = self._updater.reconverge(
            self._graph,
            self._last.state,
            edits,
            start_round=self._next_round,
        )
        return self._finish(result)


def simulate(
    node_names: Sequence[str],
    edges: Iterable[Edit],
    updates: Sequence[Edit] = (),
    config: EngineConfig | None = None,
) -> SimulationReport:
    """Build the graph, converge, and re-converge after ``updates`` if any.

    Args:
        node_names: Declared router names
        edges: Initial links
        updates: Update batch; an empty batch skips the update phase
        config: Engine configuration

    Returns:
        SimulationReport with one or two phases
    """
    sim = DistanceVectorSimulation(build_initial_graph(node_names, edges), config)
    report = SimulationReport(initial=sim.converge())
    if updates:
        report.update = sim.update(updates)
    else:
        logger.debug("No update batch; skipping re-convergence")
    return report


__all__ = [
    "RoutingTables",
    "Phase",
    "SimulationReport",
    "DistanceVectorSimulation",
    "simulate",
]
