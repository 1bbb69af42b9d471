"""Command-line driver: topology script in, distance and routing tables out.

Everything is computed before anything is written, so a fatal error never
leaves partial tables on stdout.

Exit codes:
    0: success
    1: ``--verify`` found routing tables disagreeing with the reference
    2: malformed input (bad cost token, unknown node, truncated script)
    3: relaxation exceeded the round cap
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from dvconverge._version import __version__
from dvconverge.config import EngineConfig
from dvconverge.convergence import apply_updates, verify_routing_tables
from dvconverge.simulation import SimulationReport, simulate
from dvconverge.textio import TopologyScript, format_routing_tables, format_snapshot, parse_topology
from dvconverge.topology import build_initial_graph
from dvconverge.types import ConvergenceError, InputFormatError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VERIFY_FAILED = 1
EXIT_INPUT_ERROR = 2
EXIT_CONVERGENCE_ERROR = 3


def render_report(report: SimulationReport) -> str:
    """Distance tables of every changing round, then routing tables, per phase."""
    parts = []
    for phase in report.phases:
        parts.extend(format_snapshot(snapshot) for snapshot in phase.result.snapshots)
        parts.append(format_routing_tables(phase.routing_tables))
    return "".join(parts)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dvconverge",
        description="Simulate distance-vector routing convergence from a topology script.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="topology script (default: stdin)",
    )
    parser.add_argument(
        "--cold-start",
        action="store_true",
        help="re-converge from scratch after the update batch",
    )
    parser.add_argument(
        "--admit-new-nodes",
        action="store_true",
        help="declare unknown node names met in the update batch",
    )
    parser.add_argument(
        "--max-rounds-factor",
        type=int,
        default=EngineConfig.max_rounds_factor,
        help="round cap as a multiple of the node count (default: %(default)s)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="check the final routing tables against reference shortest paths",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level on stderr (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _verify(script: TopologyScript, report: SimulationReport, admit_new_nodes: bool) -> list[str]:
    graph = build_initial_graph(script.nodes, script.edges)
    problems = verify_routing_tables(graph, report.initial.routing_tables)
    if report.update is not None:
        apply_updates(graph, script.updates, admit_new_nodes=admit_new_nodes)
        problems.extend(verify_routing_tables(graph, report.update.routing_tables))
    return problems


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    text = args.input.read()
    if args.input is not sys.stdin:
        args.input.close()

    try:
        config = EngineConfig(
            max_rounds_factor=args.max_rounds_factor,
            warm_start=not args.cold_start,
            admit_new_nodes=args.admit_new_nodes,
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_INPUT_ERROR

    try:
        script = parse_topology(text)
        report = simulate(script.nodes, script.edges, script.updates, config)
    except InputFormatError as e:
        logger.error(f"Input error: {e}")
        return EXIT_INPUT_ERROR
    except ConvergenceError as e:
        logger.error(f"Convergence failure: {e}")
        return EXIT_CONVERGENCE_ERROR

    sys.stdout.write(render_report(report))

    if args.verify:
        problems = _verify(script, report, args.admit_new_nodes)
        for problem in problems:
            logger.error(f"Verification: {problem}")
        if problems:
            return EXIT_VERIFY_FAILED
        logger.info("Routing tables match reference shortest paths")

    return EXIT_OK


__all__ = [
    "EXIT_OK",
    "EXIT_VERIFY_FAILED",
    "EXIT_INPUT_ERROR",
    "EXIT_CONVERGENCE_ERROR",
    "render_report",
    "build_parser",
    "main",
]
