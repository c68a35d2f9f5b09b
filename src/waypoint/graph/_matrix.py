"""AdjacencyMatrixGraph — numpy-backed dense graph implementing WeightedGraph."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import numpy as np

from waypoint.exceptions import VertexNotFoundError
from waypoint.graph.types import Edge, Vertex, validate_weight

T = TypeVar("T")

_DEFAULT_CAPACITY = 16


class AdjacencyMatrixGraph(Generic[T]):
    """Directed weighted graph stored as a dense ``float64`` weight matrix.

    ``NaN`` marks a missing edge, so zero-weight edges are representable.
    The matrix is over-allocated and doubles when a vertex is created past
    its capacity; only the leading ``vertex_count`` square is meaningful.

    ``edges_from`` reports edges in ascending target-index order.

    Implements the ``WeightedGraph`` and ``SupportsMutation`` protocols.
    """

    def __init__(self, *, capacity: int = _DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            msg = f"capacity must be positive, got {capacity}"
            raise ValueError(msg)
        self._data: list[T] = []
        self._weights: np.ndarray = np.full((capacity, capacity), np.nan)

    # ------------------------------------------------------------------
    # Vertex operations
    # ------------------------------------------------------------------

    def create_vertex(self, data: T) -> Vertex[T]:
        """Append a vertex carrying *data* and return its handle."""
        idx = len(self._data)
        if idx == self._weights.shape[0]:
            self._grow(idx * 2)
        self._data.append(data)
        return Vertex(idx, data)

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
        """Set the weight of the edge *source* → *target*."""
        src = self._require_vertex(source)
        tgt = self._require_vertex(target)
        self._weights[src, tgt] = validate_weight(weight)

    def add_undirected_edge(
        self, first: Vertex[T], second: Vertex[T], weight: float = 1.0
    ) -> None:
        """Add edges in both directions with the same *weight*."""
        self.add_directed_edge(first, second, weight)
        self.add_directed_edge(second, first, weight)

    def edges_from(self, vertex: Vertex[T]) -> list[Edge[T]]:
        """Outgoing edges of *vertex*, ordered by target index."""
        src = self._require_vertex(vertex)
        row = self._weights[src, : len(self._data)]
        source = Vertex(src, self._data[src])
        return [
            Edge(source, Vertex(int(tgt), self._data[tgt]), float(row[tgt]))
            for tgt in np.flatnonzero(~np.isnan(row))
        ]

    def weight_between(self, source: Vertex[T], target: Vertex[T]) -> float | None:
        """Weight of the edge *source* → *target*, or ``None`` if absent."""
        src = self._require_vertex(source)
        tgt = self._require_vertex(target)
        weight = self._weights[src, tgt]
        if np.isnan(weight):
            return None
        return float(weight)

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
        n = len(self._data)
        return int(np.count_nonzero(~np.isnan(self._weights[:n, :n])))

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the ``vertex_count`` square weight matrix (``NaN`` = no edge)."""
        n = len(self._data)
        return self._weights[:n, :n].copy()

    def __repr__(self) -> str:
        return f"AdjacencyMatrixGraph(vertices={self.vertex_count}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _grow(self, capacity: int) -> None:
        """Reallocate the weight matrix to *capacity*, keeping existing edges."""
        n = self._weights.shape[0]
        grown = np.full((capacity, capacity), np.nan)
        grown[:n, :n] = self._weights
        self._weights = grown

    def _require_vertex(self, vertex: Vertex[Any]) -> int:
        """Return the index of *vertex*, or raise ``VertexNotFoundError``."""
        if not self.has_vertex(vertex):
            msg = f"Vertex not found: {vertex!r}"
            raise VertexNotFoundError(msg)
        return vertex.index
