"""Link Failure -- Warm-started re-convergence after removing a link.

Demonstrates DistanceVectorSimulation on a triangle where the cheap
path between B and C disappears.
"""

from dvconverge import DistanceVectorSimulation, build_initial_graph
from dvconverge.textio import format_routing_tables, format_snapshot

# =============================================================
# Build a 3-router triangle
# =============================================================
print("=== Initial Convergence ===")

graph = build_initial_graph(["A", "B", "C"], [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
sim = DistanceVectorSimulation(graph)

phase = sim.converge()
for snapshot in phase.result.snapshots:
    print(format_snapshot(snapshot), end="")
print(format_routing_tables(phase.routing_tables), end="")
print(f"Changing rounds: {phase.result.changing_rounds}, next round: {sim.next_round}")

# =============================================================
# Remove B-C and re-converge from the previous state
# =============================================================
print("\n=== After Removing B-C ===")

phase = sim.update([("B", "C", -1)])
for snapshot in phase.result.snapshots:
    print(format_snapshot(snapshot), end="")
print(format_routing_tables(phase.routing_tables), end="")
print(f"Changing rounds: {phase.result.changing_rounds}, next round: {sim.next_round}")
