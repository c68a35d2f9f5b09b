"""Search protocols — callables and algorithm interfaces used by the search layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from waypoint.graph.protocols import WeightedGraph
    from waypoint.graph.types import Vertex
    from waypoint.search.types import PathResult


class Heuristic(Protocol):
    """Estimated remaining cost from *node* to *goal* (payloads, not vertices).

    Must be non-negative, and admissible for the returned path to be optimal.
    """

    def __call__(self, node: Any, goal: Any, /) -> float: ...


class VisitCallback(Protocol):
    """Observer notified once per vertex when it is selected for expansion."""

    def __call__(self, vertex: Vertex[Any], /) -> None: ...


@runtime_checkable
class ShortestPathAlgorithm(Protocol):
    """Single-source, single-goal shortest path algorithm."""

    def find_path(
        self,
        graph: WeightedGraph,
        start: Vertex[Any],
        goal: Vertex[Any],
        heuristic: Heuristic,
        *,
        on_visit: VisitCallback | None = None,
    ) -> PathResult[Any] | None: ...
