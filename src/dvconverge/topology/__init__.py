"""Router topology: graph of named nodes and the alphabetical cost index.

Key features:
- Undirected weighted links with add/overwrite/remove semantics
- Strict node declaration (undeclared names are fatal)
- Stable alphabetical name <-> position mapping
"""

from __future__ import annotations

from dvconverge.topology.graph import (
    REMOVE_LINK,
    Link,
    NetworkGraph,
    build_initial_graph,
)
from dvconverge.topology.index import CostIndex

__all__ = [
    "REMOVE_LINK",
    "Link",
    "NetworkGraph",
    "build_initial_graph",
    "CostIndex",
]
