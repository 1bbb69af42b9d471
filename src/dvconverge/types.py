"""
Foundation Types for distance-vector convergence.

Core type definitions shared by the topology, convergence and text layers
without circular dependencies:

- Cost: two-variant link/path cost (``Finite`` or ``Unreachable``).
- Error hierarchy for fatal input and convergence failures.

Costs are never bare numbers. ``Unreachable`` absorbs addition and sorts
after every ``Finite`` value, so comparisons cannot treat ``INF`` as an
integer or the other way round.
"""

from __future__ import annotations

from dataclasses import dataclass

INF_TOKEN = "INF"
"""Rendering of an unreachable cost in tables."""


class Cost:
    """Base class for the two cost variants."""

    __slots__ = ()

    @property
    def is_finite(self) -> bool:
        return isinstance(self, Finite)

    def __add__(self, other: Cost) -> Cost:
        if isinstance(self, Finite) and isinstance(other, Finite):
            return Finite(self.value + other.value)
        if isinstance(other, Cost):
            return UNREACHABLE
        return NotImplemented

    def _rank(self) -> tuple[int, int]:
        if isinstance(self, Finite):
            return (0, self.value)
        return (1, 0)

    def __lt__(self, other: Cost) -> bool:
        if not isinstance(other, Cost):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: Cost) -> bool:
        if not isinstance(other, Cost):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: Cost) -> bool:
        if not isinstance(other, Cost):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: Cost) -> bool:
        if not isinstance(other, Cost):
            return NotImplemented
        return self._rank() >= other._rank()


@dataclass(frozen=True, eq=True)
class Finite(Cost):
    """A reachable cost with a non-negative integer value."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Finite cost must be an int, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"Finite cost must be non-negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, eq=True)
class Unreachable(Cost):
    """No finite-cost path exists."""

    def __str__(self) -> str:
        return INF_TOKEN


UNREACHABLE = Unreachable()
ZERO = Finite(0)


# ── Errors ─────────────────────────────────────────────────────────────


@dataclass
class DistanceVectorError(Exception):
    """Base class for fatal simulation errors.

    Attributes:
        message: Error message
    """

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class InputFormatError(DistanceVectorError):
    """Malformed topology input.

    Attributes:
        message: Error message
        token: Offending token, if any
    """

    token: str | None = None

    def __str__(self) -> str:
        if self.token is not None:
            return f"{self.message} (token={self.token!r})"
        return self.message


@dataclass
class UnknownNodeError(InputFormatError):
    """Reference to a node name that was never declared."""


@dataclass
class ConvergenceError(DistanceVectorError):
    """Relaxation did not reach a fixed point within the round cap.

    Signals an algorithm invariant failure rather than bad input.

    Attributes:
        message: Error message
        rounds: Rounds executed before giving up
        limit: Configured round cap
    """

    rounds: int = 0
    limit: int = 0

    def __str__(self) -> str:
        return f"{self.message} after {self.rounds} rounds (limit={self.limit})"


__all__ = [
    "INF_TOKEN",
    "Cost",
    "Finite",
    "Unreachable",
    "UNREACHABLE",
    "ZERO",
    "DistanceVectorError",
    "InputFormatError",
    "UnknownNodeError",
    "ConvergenceError",
]
