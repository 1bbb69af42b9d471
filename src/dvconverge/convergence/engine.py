"""Synchronous distance-vector relaxation (Bellman-Ford rounds).

State per ordered pair (source, destination), source != destination:

- ``rows[source][destination][via]``: cost of reaching destination by first
  hopping to ``via`` (every node other than source, in name order).
- ``best[source][destination]``: cheapest finite via, or "no path".

One round:
1. For every pair and every via != source:
   row[s][d][v] = direct(s, v) + best_prev(v, d)   (best_prev(d, d) = 0)
2. best[s][d] = via with the minimum finite cost, ties to the smallest name
3. Swap in the new buffers

Rounds only ever read the previous round's buffers, so no pair can observe
another pair's result from the same round. The run stops at the first round
in which no row value differs from the previous round.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from dvconverge.config import EngineConfig
from dvconverge.topology.graph import NetworkGraph
from dvconverge.topology.index import CostIndex
from dvconverge.types import UNREACHABLE, ZERO, ConvergenceError, Cost, Finite

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BestEstimate:
    """Current best route estimate for one (source, destination) pair."""

    via: str | None
    """Chosen first hop, None when there is no path"""

    cost: Cost
    """Cost through ``via``"""

    @property
    def has_path(self) -> bool:
        return self.via is not None


NO_PATH = BestEstimate(via=None, cost=UNREACHABLE)


@dataclass
class EngineState:
    """Name-keyed relaxation buffers for one index.

    Self distances are not stored; :meth:`best_cost` answers ``Finite(0)``
    for them.
    """

    index: CostIndex
    best: dict[str, dict[str, BestEstimate]] = field(default_factory=dict)
    rows: dict[str, dict[str, dict[str, Cost]]] = field(default_factory=dict)

    @classmethod
    def fresh(cls, index: CostIndex) -> EngineState:
        """All pairs "no path", every row empty."""
        best = {s: {d: NO_PATH for d in index if d != s} for s in index}
        rows: dict[str, dict[str, dict[str, Cost]]] = {s: {} for s in index}
        return cls(index=index, best=best, rows=rows)

    def estimate(self, source: str, destination: str) -> BestEstimate:
        if source == destination:
            return BestEstimate(via=source, cost=ZERO)
        return self.best[source][destination]

    def best_cost(self, source: str, destination: str) -> Cost:
        if source == destination:
            return ZERO
        return self.best[source][destination].cost

    def row(self, source: str, destination: str) -> Mapping[str, Cost]:
        """Via -> cost row for a pair; empty before the first round."""
        return self.rows[source].get(destination, {})


@dataclass(frozen=True)
class DistanceTable:
    """One router's distance table after a round.

    ``costs[via][destination]`` holds the relay estimate through each direct
    neighbour.
    """

    source: str
    destinations: tuple[str, ...]
    vias: tuple[str, ...]
    costs: dict[str, dict[str, Cost]]

    def cost(self, via: str, destination: str) -> Cost:
        return self.costs[via][destination]


@dataclass(frozen=True)
class RoundSnapshot:
    """Distance tables of every router after a round that changed something."""

    round: int
    tables: dict[str, DistanceTable]


@dataclass
class ConvergenceResult:
    """Outcome of running the engine to a fixed point."""

    state: EngineState
    """Converged buffers"""

    snapshots: tuple[RoundSnapshot, ...]
    """One snapshot per non-final round, in order"""

    rounds: int
    """Rounds executed, including the final unchanged round"""

    next_round: int
    """Round number the next run should start from"""

    @property
    def changing_rounds(self) -> int:
        """Rounds in which at least one value changed."""
        return len(self.snapshots)


def select_best(row: Mapping[str, Cost]) -> BestEstimate:
    """Pick the cheapest finite via; ties go to the smallest via name."""
    best = NO_PATH
    for via in sorted(row):
        cost = row[via]
        if not cost.is_finite:
            continue
        if best.via is None or cost < best.cost:
            best = BestEstimate(via=via, cost=cost)
    return best


class RelaxationEngine:
    """
    Round-synchronous distance-vector relaxation over a NetworkGraph.

    Direct link costs are captured when the engine is created; later graph
    edits need a new engine (see ``TopologyUpdater``).

    Usage:
        engine = RelaxationEngine(graph)
        result = engine.run()

        for snapshot in result.snapshots:
            print(snapshot.round, snapshot.tables["A"].costs)
    """

    def __init__(
        self,
        graph: NetworkGraph,
        config: EngineConfig | None = None,
        seed: EngineState | None = None,
    ):
        """
        Initialize the engine.

        Args:
            graph: Topology providing nodes and direct link costs
            config: Engine configuration
            seed: Pre-populated state for a warm start; must be built over
                the same node set as ``graph``
        """
        self._config = config or EngineConfig()
        self._index = CostIndex.from_graph(graph)
        self._neighbors: dict[str, dict[str, int]] = {
            name: graph.neighbors_of(name) for name in self._index
        }

        if seed is None:
            self._state = EngineState.fresh(self._index)
        elif seed.index != self._index:
            raise ValueError(f"Seed state index {seed.index!r} does not match graph {self._index!r}")
        else:
            self._state = seed

        self._stats = {
            "rounds": 0,
            "relaxations": 0,
            "changed_values": 0,
        }

    @property
    def index(self) -> CostIndex:
        return self._index

    @property
    def state(self) -> EngineState:
        return self._state

    def _direct_cost(self, source: str, via: str) -> Cost:
        link = self._neighbors[source].get(via)
        return UNREACHABLE if link is None else Finite(link)

    def step(self, round_number: int) -> bool:
        """
        Execute one relaxation round.

        Args:
            round_number: Round label, used for logging only

        Returns:
            True if any (source, destination, via) value changed
        """
        prev = self._state
        names = self._index.names
        new_best: dict[str, dict[str, BestEstimate]] = {}
        new_rows: dict[str, dict[str, dict[str, Cost]]] = {}
        changed = 0

        for source in names:
            best_for_source: dict[str, BestEstimate] = {}
            rows_for_source: dict[str, dict[str, Cost]] = {}
            for destination in names:
                if destination == source:
                    continue
                old_row = prev.row(source, destination)
                row: dict[str, Cost] = {}
                for via in names:
                    if via == source:
                        continue
                    cost = self._direct_cost(source, via) + prev.best_cost(via, destination)
                    row[via] = cost
                    if via not in old_row or old_row[via] != cost:
                        changed += 1
                rows_for_source[destination] = row
                best_for_source[destination] = select_best(row)
                self._stats["relaxations"] += len(row)
            new_best[source] = best_for_source
            new_rows[source] = rows_for_source

        self._state = EngineState(index=self._index, best=new_best, rows=new_rows)
        self._stats["rounds"] += 1
        self._stats["changed_values"] += changed
        logger.debug(f"Round t={round_number}: {changed} values changed")
        return changed > 0

    def snapshot(self, round_number: int) -> RoundSnapshot:
        """Distance tables of every router from the current buffers."""
        names = self._index.names
        tables: dict[str, DistanceTable] = {}
        for source in names:
            destinations = tuple(d for d in names if d != source)
            vias = tuple(self._neighbors[source])
            costs = {
                via: {d: self._state.row(source, d).get(via, UNREACHABLE) for d in destinations}
                for via in vias
            }
            tables[source] = DistanceTable(
                source=source,
                destinations=destinations,
                vias=vias,
                costs=costs,
            )
        return RoundSnapshot(round=round_number, tables=tables)

    def run(self, start_round: int = 0) -> ConvergenceResult:
        """
        Relax until a round changes nothing.

        Args:
            start_round: Label of the first round executed

        Returns:
            ConvergenceResult with the converged state and per-round snapshots

        Raises:
            ConvergenceError: If the round cap is reached without a fixed point
        """
        limit = self._config.round_limit(len(self._index))
        snapshots: list[RoundSnapshot] = []
        round_number = start_round
        executed = 0

        while True:
            if executed >= limit:
                logger.error(f"No fixed point after {executed} rounds (limit={limit})")
                raise ConvergenceError(
                    "Distance-vector relaxation did not converge",
                    rounds=executed,
                    limit=limit,
                )
            changed = self.step(round_number)
            executed += 1
            if not changed:
                break
            snapshots.append(self.snapshot(round_number))
            round_number += 1

        logger.info(
            f"Converged over {len(self._index)} nodes after {executed} rounds "
            f"({len(snapshots)} with changes)"
        )
        return ConvergenceResult(
            state=self._state,
            snapshots=tuple(snapshots),
            rounds=executed,
            next_round=round_number,
        )

    def get_statistics(self) -> dict[str, Any]:
        """Get engine statistics."""
        return {
            **self._stats,
            "nodes": len(self._index),
        }


def run_to_convergence(
    graph: NetworkGraph,
    config: EngineConfig | None = None,
    start_round: int = 0,
) -> ConvergenceResult:
    """Cold-start the engine on ``graph`` and run it to a fixed point."""
    return RelaxationEngine(graph, config=config).run(start_round=start_round)


__all__ = [
    "BestEstimate",
    "NO_PATH",
    "EngineState",
    "DistanceTable",
    "RoundSnapshot",
    "ConvergenceResult",
    "select_best",
    "RelaxationEngine",
    "run_to_convergence",
]
