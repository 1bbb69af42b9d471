"""Test fixtures for convergence tests."""

from __future__ import annotations

import pytest

from dvconverge.topology import NetworkGraph, build_initial_graph


@pytest.fixture
def triangle_graph() -> NetworkGraph:
    """A-B=1, B-C=1, A-C=5: the direct A-C link loses to the detour via B."""
    return build_initial_graph(["A", "B", "C"], [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])


@pytest.fixture
def square_graph() -> NetworkGraph:
    """A-B, A-C, B-D, C-D all cost 1: equal-cost paths A..D via B or C."""
    return build_initial_graph(
        ["D", "C", "B", "A"],
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)],
    )


@pytest.fixture
def isolated_graph() -> NetworkGraph:
    """A-B=1, B-C=2 with D declared but never linked."""
    return build_initial_graph(["A", "B", "C", "D"], [("A", "B", 1), ("B", "C", 2)])


@pytest.fixture
def zero_loop_graph() -> NetworkGraph:
    """A-B=0, A-C=1, B-C=1: equal-cost ties make A and B point at each other for C."""
    return build_initial_graph(["A", "B", "C"], [("A", "B", 0), ("A", "C", 1), ("B", "C", 1)])


def _routes(tables, source: str) -> list[tuple[str, str, str]]:
    return [(e.destination, str(e.next_hop), str(e.cost)) for e in tables[source]]


@pytest.fixture
def routes():
    """Render a routing table of one source as string triples."""
    return _routes
