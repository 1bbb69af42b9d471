"""Warm vs Cold Start -- Rounds needed to re-converge after an update.

Compares seeding relaxation from the previous converged state against
starting over, on a ring where one link gets more expensive.
"""

from dvconverge import EngineConfig, build_initial_graph, simulate
from dvconverge.convergence import verify_routing_tables

# =============================================================
# A 6-router ring
# =============================================================
names = [f"R{i}" for i in range(6)]
edges = [(names[i], names[(i + 1) % 6], 1) for i in range(6)]
updates = [("R0", "R1", 4)]

print("=== Warm vs Cold ===")
reports = {}
for label, warm in [("warm", True), ("cold", False)]:
    report = simulate(names, edges, updates, EngineConfig(warm_start=warm))
    reports[label] = report
    print(f"  {label:5s}: rounds={report.update.result.rounds}, "
          f"changing={report.update.result.changing_rounds}")

# =============================================================
# Cross-check against reference shortest paths
# =============================================================
print("\n=== Verification ===")

graph = build_initial_graph(names, edges)
for u, v, cost in updates:
    graph.set_link(u, v, cost)
for label, report in reports.items():
    problems = verify_routing_tables(graph, report.update.routing_tables)
    print(f"  {label:5s}: problems={problems or 'none'}")
