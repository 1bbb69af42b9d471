"""Reference all-pairs shortest distances for cross-checking results.

Floyd-Warshall over the adjacency matrix (numpy, vectorised per pivot).
Independent of the relaxation engine, so it can validate converged routing
tables:

- every reported cost equals the shortest distance
- every next hop is a direct neighbour
- cost == link(source, next_hop) + dist(next_hop, destination)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from dvconverge.types import UNREACHABLE, Cost, Finite

if TYPE_CHECKING:
    from dvconverge.topology.graph import NetworkGraph

    from .derive import RoutingEntry


def _distance_matrix(graph: NetworkGraph) -> tuple[list[list[float]], list[str]]:
    """All-pairs distance matrix with ``inf`` for unreachable pairs.

    Returns:
        Tuple of (distance matrix, ordered node names)
    """
    import numpy as np

    names = list(graph.nodes)
    n = len(names)
    if n == 0:
        return [], names
    position = {name: i for i, name in enumerate(names)}

    dist = np.full((n, n), np.inf, dtype=np.float64)
    np.fill_diagonal(dist, 0.0)
    for link in graph.links():
        i, j = position[link.u], position[link.v]
        dist[i, j] = dist[j, i] = float(link.cost)

    for k in range(n):
        dist = np.minimum(dist, dist[:, k, None] + dist[None, k, :])

    return dist.tolist(), names


def shortest_distances(graph: NetworkGraph) -> dict[str, dict[str, Cost]]:
    """Shortest distance between every ordered pair of distinct nodes."""
    matrix, names = _distance_matrix(graph)
    result: dict[str, dict[str, Cost]] = {}
    for i, source in enumerate(names):
        row: dict[str, Cost] = {}
        for j, destination in enumerate(names):
            if i == j:
                continue
            value = matrix[i][j]
            row[destination] = UNREACHABLE if value == float("inf") else Finite(int(value))
        result[source] = row
    return result


def verify_routing_tables(
    graph: NetworkGraph,
    tables: Mapping[str, Sequence[RoutingEntry]],
) -> list[str]:
    """Check routing tables against reference distances.

    Args:
        graph: Topology the tables were computed for
        tables: Output of ``derive_routing_tables``

    Returns:
        Human-readable problems; empty when the tables are correct
    """
    reference = shortest_distances(graph)
    problems: list[str] = []

    for source, entries in tables.items():
        for entry in entries:
            expected = reference[source][entry.destination]
            if entry.cost != expected:
                problems.append(
                    f"{source}->{entry.destination}: cost {entry.cost}, expected {expected}"
                )
                continue
            if not entry.reachable:
                continue
            link = graph.link_cost(source, entry.next_hop)
            if link is None:
                problems.append(
                    f"{source}->{entry.destination}: next hop {entry.next_hop} is not a neighbour"
                )
                continue
            if entry.next_hop == entry.destination:
                remaining: Cost = Finite(0)
            else:
                remaining = reference[entry.next_hop][entry.destination]
            if Finite(link) + remaining != entry.cost:
                problems.append(
                    f"{source}->{entry.destination}: next hop {entry.next_hop} "
                    f"does not lie on a shortest path"
                )

    return problems


__all__ = [
    "shortest_distances",
    "verify_routing_tables",
]
