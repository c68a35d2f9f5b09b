"""Search result types — immutable data containers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from waypoint.graph.types import Vertex

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PathResult(Generic[T]):
    """A shortest path found by a search.

    Attributes:
        path: Node payloads from start to goal, both inclusive.
        distance: Sum of the edge weights along ``path``.
        vertices: The graph handles corresponding to ``path``.
    """

    path: tuple[T, ...]
    distance: float
    vertices: tuple[Vertex[T], ...] = ()

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.path) - 1


def path_result(vertices: list[Vertex[T]], distance: float) -> PathResult[T]:
    """Convenience factory — builds an immutable result from a vertex list."""
    return PathResult(
        path=tuple(v.data for v in vertices),
        distance=distance,
        vertices=tuple(vertices),
    )
