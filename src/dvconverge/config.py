"""Configuration for the relaxation engine and topology updates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Configuration for distance-vector convergence runs."""

    max_rounds_factor: int = 3
    """Round cap as a multiple of the node count"""

    warm_start: bool = True
    """Seed re-convergence from the previous converged state"""

    admit_new_nodes: bool = False
    """Declare unknown node names met in an update batch instead of failing"""

    def __post_init__(self) -> None:
        if self.max_rounds_factor < 1:
            raise ValueError(f"max_rounds_factor must be >= 1, got {self.max_rounds_factor}")

    def round_limit(self, node_count: int) -> int:
        """Maximum number of rounds allowed for a graph of ``node_count`` nodes."""
        return max(1, self.max_rounds_factor * node_count)


__all__ = [
    "EngineConfig",
]
