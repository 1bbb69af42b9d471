"""Undirected weighted router graph.

Nodes are router names. Links are unordered pairs of distinct declared
nodes with a non-negative integer cost; at most one link exists per pair.
A cost of ``-1`` passed to :meth:`NetworkGraph.set_link` removes the link.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from dvconverge.types import InputFormatError, UnknownNodeError

logger = logging.getLogger(__name__)

REMOVE_LINK = -1
"""Reserved cost meaning "remove the link between u and v"."""


@dataclass(frozen=True)
class Link:
    """An undirected link, stored with ``u < v``.

    Attributes:
        u: Alphabetically smaller endpoint
        v: Alphabetically larger endpoint
        cost: Link cost
    """

    u: str
    v: str
    cost: int

    @classmethod
    def between(cls, a: str, b: str, cost: int) -> Link:
        u, v = sorted((a, b))
        return cls(u=u, v=v, cost=cost)


class NetworkGraph:
    """Router graph with symmetric adjacency.

    Every node referenced by a link must have been declared with
    :meth:`add_node` first; the graph never invents nodes.
    """

    def __init__(self) -> None:
        """Initialize empty graph."""
        self._adjacency: dict[str, dict[str, int]] = {}

    def add_node(self, name: str) -> None:
        """Declare a node. Declaring an existing node is a no-op."""
        if not name:
            raise InputFormatError("Node name must be non-empty")
        self._adjacency.setdefault(name, {})

    def has_node(self, name: str) -> bool:
        return name in self._adjacency

    def _require(self, name: str) -> None:
        if name not in self._adjacency:
            raise UnknownNodeError(f"Unknown node: {name}", token=name)

    def set_link(self, u: str, v: str, cost: int) -> None:
        """Add, overwrite or remove the link between ``u`` and ``v``.

        Args:
            u: One endpoint
            v: Other endpoint
            cost: Non-negative link cost, or ``-1`` to remove the link

        Raises:
            UnknownNodeError: If either endpoint was never declared
            InputFormatError: For self links or negative costs other than ``-1``
        """
        self._require(u)
        self._require(v)
        if u == v:
            raise InputFormatError(f"Self link on {u} is not allowed", token=u)

        if cost == REMOVE_LINK:
            if v in self._adjacency[u]:
                del self._adjacency[u][v]
                del self._adjacency[v][u]
                logger.debug(f"Removed link {u}-{v}")
            return

        if cost < 0:
            raise InputFormatError(f"Negative link cost {cost} for {u}-{v}", token=str(cost))

        self._adjacency[u][v] = cost
        self._adjacency[v][u] = cost
        logger.debug(f"Set link {u}-{v} = {cost}")

    def link_cost(self, u: str, v: str) -> int | None:
        """Direct link cost between ``u`` and ``v``, or None if not linked."""
        return self._adjacency.get(u, {}).get(v)

    def neighbors_of(self, name: str) -> dict[str, int]:
        """Neighbours of ``name`` mapped to link costs, in name order.

        Returns a copy; mutating it does not affect the graph.
        """
        self._require(name)
        return dict(sorted(self._adjacency[name].items()))

    @property
    def nodes(self) -> tuple[str, ...]:
        """Declared nodes in ascending name order."""
        return tuple(sorted(self._adjacency))

    def links(self) -> list[Link]:
        """All links in ``(u, v)`` order."""
        seen = {}
        for u in self.nodes:
            for v, cost in self._adjacency[u].items():
                link = Link.between(u, v, cost)
                seen[(link.u, link.v)] = link
        return [seen[key] for key in sorted(seen)]

    @property
    def node_count(self) -> int:
        """Number of nodes."""
        return len(self._adjacency)

    @property
    def link_count(self) -> int:
        """Number of undirected links."""
        return sum(len(adj) for adj in self._adjacency.values()) // 2

    def copy(self) -> NetworkGraph:
        """Independent copy of this graph."""
        clone = NetworkGraph()
        clone._adjacency = {name: dict(adj) for name, adj in self._adjacency.items()}
        return clone

    def __repr__(self) -> str:
        return f"NetworkGraph(nodes={self.node_count}, links={self.link_count})"


def build_initial_graph(
    node_names: Iterable[str],
    edges: Iterable[tuple[str, str, int]],
) -> NetworkGraph:
    """Build the initial topology.

    A ``-1`` cost in the initial edge list has nothing to remove and is
    treated as a no-op.

    Args:
        node_names: Declared router names
        edges: ``(u, v, cost)`` triples applied in order

    Returns:
        The constructed NetworkGraph
    """
    graph = NetworkGraph()
    for name in node_names:
        graph.add_node(name)
    for u, v, cost in edges:
        graph.set_link(u, v, cost)
    logger.info(f"Built initial graph with {graph.node_count} nodes and {graph.link_count} links")
    return graph


__all__ = [
    "REMOVE_LINK",
    "Link",
    "NetworkGraph",
    "build_initial_graph",
]
