"""Tests for the numpy reference distances and routing table verification."""

from __future__ import annotations

from dvconverge.convergence import (
    RoutingEntry,
    derive_routing_tables,
    run_to_convergence,
    shortest_distances,
    verify_routing_tables,
)
from dvconverge.topology import build_initial_graph
from dvconverge.types import UNREACHABLE, Finite


class TestShortestDistances:
    """Tests for the Floyd-Warshall reference."""

    def test_triangle(self, triangle_graph):
        dist = shortest_distances(triangle_graph)
        assert dist["A"] == {"B": Finite(1), "C": Finite(2)}
        assert dist["C"]["A"] == Finite(2)

    def test_unreachable(self, isolated_graph):
        dist = shortest_distances(isolated_graph)
        assert dist["A"]["D"] == UNREACHABLE
        assert dist["D"] == {"A": UNREACHABLE, "B": UNREACHABLE, "C": UNREACHABLE}

    def test_empty_graph(self):
        assert shortest_distances(build_initial_graph([], [])) == {}


class TestVerifyRoutingTables:
    """Tests for cross-checking derived routing tables."""

    def test_converged_tables_pass(self, square_graph, isolated_graph, zero_loop_graph):
        for graph in (square_graph, isolated_graph, zero_loop_graph):
            tables = derive_routing_tables(run_to_convergence(graph).state)
            assert verify_routing_tables(graph, tables) == []

    def test_wrong_cost_reported(self, triangle_graph):
        tables = {"A": (RoutingEntry("C", "C", Finite(5)),)}
        problems = verify_routing_tables(triangle_graph, tables)
        assert problems == ["A->C: cost 5, expected 2"]

    def test_non_neighbour_next_hop_reported(self, isolated_graph):
        tables = {"A": (RoutingEntry("C", "C", Finite(3)),)}
        problems = verify_routing_tables(isolated_graph, tables)
        assert problems == ["A->C: next hop C is not a neighbour"]

    def test_next_hop_off_shortest_path_reported(self, triangle_graph):
        graph = build_initial_graph(["A", "B", "C"], [("A", "B", 1), ("B", "C", 1), ("A", "C", 2)])
        tables = {"A": (RoutingEntry("B", "C", Finite(1)),)}
        problems = verify_routing_tables(graph, tables)
        assert problems == ["A->B: next hop C does not lie on a shortest path"]
