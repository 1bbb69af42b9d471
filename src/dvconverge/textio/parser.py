"""Parser for the whitespace-separated topology protocol.

Layout::

    A B C            node names
    START
    A B 1            initial links: u v cost
    B C 1
    UPDATE
    B C -1           update batch: u v cost (-1 removes)
    END

Only syntax is checked here; node declarations are enforced by the graph.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from dvconverge.types import InputFormatError

START = "START"
UPDATE = "UPDATE"
END = "END"

_COST_RE = re.compile(r"^-?[0-9]+$")


@dataclass
class TopologyScript:
    """Parsed topology input."""

    nodes: list[str] = field(default_factory=list)
    edges: list[tuple[str, str, int]] = field(default_factory=list)
    updates: list[tuple[str, str, int]] = field(default_factory=list)


def parse_cost(token: str) -> int:
    """Parse a link cost token.

    Raises:
        InputFormatError: If the token is not an integer
    """
    if not _COST_RE.match(token):
        raise InputFormatError("Malformed cost", token=token)
    return int(token)


def _next(tokens: Iterator[str], expecting: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise InputFormatError(f"Unexpected end of input, expected {expecting}") from None


def _read_triples(tokens: Iterator[str], terminator: str) -> list[tuple[str, str, int]]:
    triples = []
    while True:
        u = _next(tokens, f"link or {terminator}")
        if u == terminator:
            return triples
        v = _next(tokens, "link endpoint")
        cost = parse_cost(_next(tokens, "link cost"))
        triples.append((u, v, cost))


def parse_topology(text: str) -> TopologyScript:
    """Parse a complete topology script.

    Args:
        text: Input text

    Returns:
        TopologyScript with nodes, initial edges and the update batch

    Raises:
        InputFormatError: On truncated input or malformed costs
    """
    tokens = iter(text.split())
    script = TopologyScript()

    while True:
        token = _next(tokens, START)
        if token == START:
            break
        script.nodes.append(token)

    script.edges = _read_triples(tokens, UPDATE)
    script.updates = _read_triples(tokens, END)
    return script


__all__ = [
    "START",
    "UPDATE",
    "END",
    "TopologyScript",
    "parse_cost",
    "parse_topology",
]
