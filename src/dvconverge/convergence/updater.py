"""Topology update batches and warm-started re-convergence.

After a batch of link edits the engine is rebuilt against a fresh
CostIndex and seeded, by node name, from the previous converged state.

Seeding rule: an estimate ``best[a][b]`` is carried only if its next-hop
chain ``a -> v1 -> ... -> b`` in the previous state still exists and no
link on it got more expensive. Such a carried cost is never below the new
shortest distance, which lets the synchronous rounds settle on the same
fixed point a cold start reaches. Estimates failing the check start as
"no path"; left in place they would count to infinity.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from dvconverge.config import EngineConfig
from dvconverge.topology.graph import REMOVE_LINK, NetworkGraph
from dvconverge.topology.index import CostIndex
from dvconverge.types import InputFormatError, UnknownNodeError

from .engine import ConvergenceResult, EngineState, RelaxationEngine

logger = logging.getLogger(__name__)

Edit = tuple[str, str, int]


def _validate_edits(graph: NetworkGraph, edits: list[Edit], admit_new_nodes: bool) -> None:
    for u, v, cost in edits:
        if not admit_new_nodes:
            for name in (u, v):
                if not graph.has_node(name):
                    raise UnknownNodeError(f"Unknown node in update batch: {name}", token=name)
        if u == v:
            raise InputFormatError(f"Self link on {u} is not allowed", token=u)
        if cost < 0 and cost != REMOVE_LINK:
            raise InputFormatError(f"Negative link cost {cost} for {u}-{v}", token=str(cost))


def apply_updates(
    graph: NetworkGraph,
    edits: Iterable[Edit],
    admit_new_nodes: bool = False,
) -> NetworkGraph:
    """Apply a batch of link edits in order.

    The whole batch is validated before the graph is touched, so a bad edit
    leaves the graph unchanged.

    Args:
        graph: Graph to mutate
        edits: ``(u, v, cost)`` triples; cost ``-1`` removes the link
        admit_new_nodes: Declare unknown names instead of failing

    Returns:
        The mutated graph

    Raises:
        UnknownNodeError: If an edit names an undeclared node and
            ``admit_new_nodes`` is False
    """
    batch = list(edits)
    _validate_edits(graph, batch, admit_new_nodes)

    for u, v, cost in batch:
        for name in (u, v):
            if not graph.has_node(name):
                logger.warning(f"Declaring node {name} introduced by update batch")
                graph.add_node(name)
        graph.set_link(u, v, cost)

    logger.info(f"Applied {len(batch)} link edits; graph now {graph!r}")
    return graph


def worsened_links(
    before: dict[tuple[str, str], int],
    graph: NetworkGraph,
) -> set[frozenset[str]]:
    """Links of ``before`` that were removed or got more expensive in ``graph``."""
    worse: set[frozenset[str]] = set()
    for (u, v), old_cost in before.items():
        new_cost = graph.link_cost(u, v)
        if new_cost is None or new_cost > old_cost:
            worse.add(frozenset((u, v)))
    return worse


def _chain_intact(
    state: EngineState,
    source: str,
    destination: str,
    worsened: set[frozenset[str]],
) -> bool:
    seen = {source}
    node = source
    while node != destination:
        via = state.estimate(node, destination).via
        if via is None:
            return False
        if frozenset((node, via)) in worsened:
            return False
        if via in seen:
            # zero-cost loop; the path cannot be reconstructed
            return False
        seen.add(via)
        node = via
    return True


@dataclass
class CarryOver:
    """Seed state for a warm start plus bookkeeping."""

    state: EngineState
    carried: int
    """Pairs copied from the previous state"""

    reset: int
    """Shared pairs that started as "no path" instead"""


def carry_over(
    previous: EngineState,
    index: CostIndex,
    worsened: set[frozenset[str]] | None = None,
) -> CarryOver:
    """Seed a state over ``index`` from ``previous``, keyed by name.

    Args:
        previous: Converged state of the prior run
        index: Index of the updated node set
        worsened: Links removed or made more expensive by the update

    Returns:
        CarryOver with the seeded state
    """
    worsened = worsened or set()
    seed = EngineState.fresh(index)
    shared = index.shared_names(previous.index)
    carried = 0
    reset = 0

    for a in shared:
        for b in shared:
            if a == b:
                continue
            estimate = previous.best[a][b]
            if estimate.has_path and not _chain_intact(previous, a, b, worsened):
                reset += 1
                continue
            seed.best[a][b] = estimate
            row = previous.rows[a].get(b)
            if row is not None:
                seed.rows[a][b] = dict(row)
            carried += 1

    if reset:
        logger.warning(f"Reset {reset} carried estimates whose routes crossed worsened links")
    logger.debug(f"Carried {carried} estimates into index of {len(index)} nodes")
    return CarryOver(state=seed, carried=carried, reset=reset)


class TopologyUpdater:
    """
    Applies an update batch and re-converges.

    Usage:
        updater = TopologyUpdater()
        result = updater.reconverge(graph, first.state, [("B", "C", -1)], first.next_round)
    """

    def __init__(self, config: EngineConfig | None = None):
        self._config = config or EngineConfig()
        self.last_carry_over: CarryOver | None = None

    def reconverge(
        self,
        graph: NetworkGraph,
        previous: EngineState,
        edits: Iterable[Edit],
        start_round: int = 0,
    ) -> ConvergenceResult:
        """
        Apply ``edits`` to ``graph`` and run the engine to a new fixed point.

        Args:
            graph: Graph the previous state was computed on; mutated in place
            previous: Converged state of the previous run
            edits: ``(u, v, cost)`` triples
            start_round: Label of the first re-convergence round

        Returns:
            ConvergenceResult for the updated topology
        """
        before = {(link.u, link.v): link.cost for link in graph.links()}
        apply_updates(graph, edits, admit_new_nodes=self._config.admit_new_nodes)
        index = CostIndex.from_graph(graph)

        seed = None
        self.last_carry_over = None
        if self._config.warm_start:
            self.last_carry_over = carry_over(previous, index, worsened_links(before, graph))
            seed = self.last_carry_over.state

        engine = RelaxationEngine(graph, config=self._config, seed=seed)
        return engine.run(start_round=start_round)


__all__ = [
    "Edit",
    "apply_updates",
    "worsened_links",
    "CarryOver",
    "carry_over",
    "TopologyUpdater",
]
