"""AdjacencyListGraph — dict-of-dicts graph implementing WeightedGraph."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from waypoint.exceptions import VertexNotFoundError
from waypoint.graph.types import Edge, Vertex, validate_weight

T = TypeVar("T")


class AdjacencyListGraph(Generic[T]):
    """Directed weighted graph stored as per-vertex successor maps.

    ``edges_from`` reports edges in the order they were first inserted,
    which the search relies on for its tie-break.

    Implements the ``WeightedGraph`` and ``SupportsMutation`` protocols.
    """

    def __init__(self) -> None:
        self._data: list[T] = []
        self._successors: list[dict[int, float]] = []

    # ------------------------------------------------------------------
    # Vertex operations
    # ------------------------------------------------------------------

    def create_vertex(self, data: T) -> Vertex[T]:
        """Append a vertex carrying *data* and return its handle."""
        self._data.append(data)
        self._successors.append({})
        return Vertex(len(self._data) - 1, data)

    def vertices(self) -> list[Vertex[T]]:
        """Return all vertices in creation order."""
        return [Vertex(idx, data) for idx, data in enumerate(self._data)]

    def has_vertex(self, vertex: Vertex[Any]) -> bool:
        """Return whether *vertex* belongs to this graph."""
        return 0 <= vertex.index < len(self._data)

    # ------------------------------------------------------------------
    # Edge operations
    # ------------------------------------------------------------------

    def add_directed_edge(
        self, source: Vertex[T], target: Vertex[T], weight: float = 1.0
    ) -> None:
        """Add or update the edge *source* → *target*."""
        src = self._require_vertex(source)
        tgt = self._require_vertex(target)
        self._successors[src][tgt] = validate_weight(weight)

    def add_undirected_edge(
        self, first: Vertex[T], second: Vertex[T], weight: float = 1.0
    ) -> None:
        """Add edges in both directions with the same *weight*."""
        self.add_directed_edge(first, second, weight)
        self.add_directed_edge(second, first, weight)

    def edges_from(self, vertex: Vertex[T]) -> list[Edge[T]]:
        """Outgoing edges of *vertex* in insertion order."""
        src = self._require_vertex(vertex)
        source = Vertex(src, self._data[src])
        return [
            Edge(source, Vertex(tgt, self._data[tgt]), weight)
            for tgt, weight in self._successors[src].items()
        ]

    def weight_between(self, source: Vertex[T], target: Vertex[T]) -> float | None:
        """Weight of the edge *source* → *target*, or ``None`` if absent."""
        src = self._require_vertex(source)
        tgt = self._require_vertex(target)
        return self._successors[src].get(tgt)

    # ------------------------------------------------------------------
    # Graph-level
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        return len(self._data)

    @property
    def edge_count(self) -> int:
        """Number of directed edges in the graph."""
        return sum(len(succ) for succ in self._successors)

    def __repr__(self) -> str:
        return f"AdjacencyListGraph(vertices={self.vertex_count}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_vertex(self, vertex: Vertex[Any]) -> int:
        """Return the index of *vertex*, or raise ``VertexNotFoundError``."""
        if not self.has_vertex(vertex):
            msg = f"Vertex not found: {vertex!r}"
            raise VertexNotFoundError(msg)
        return vertex.index
