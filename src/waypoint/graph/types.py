"""Graph value types — immutable vertex and edge handles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from waypoint.exceptions import NegativeWeightError

T = TypeVar("T")


@dataclass(frozen=True, slots=True, order=True)
class Vertex(Generic[T]):
    """Handle to a node's position in a specific graph.

    Attributes:
        index: Position assigned by the owning backend, unique per graph.
        data: The node payload (excluded from hash, equality and ordering).

    Two handles with the same ``index`` are the same vertex, so backends are
    free to hand out fresh ``Vertex`` objects on every call.
    """

    index: int
    data: T = field(hash=False, compare=False)

    def __repr__(self) -> str:
        return f"Vertex({self.index}, {self.data!r})"


@dataclass(frozen=True, slots=True)
class Edge(Generic[T]):
    """Directed, weighted connection between two vertices."""

    source: Vertex[T]
    target: Vertex[T]
    weight: float


def validate_weight(weight: float) -> float:
    """Return *weight* as a float, rejecting negative and NaN values."""
    value = float(weight)
    if math.isnan(value) or value < 0:
        msg = f"Edge weight must be a non-negative number, got {weight!r}"
        raise NegativeWeightError(msg)
    return value
