"""RustworkxGraph — rustworkx-backed graph implementing WeightedGraph."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import rustworkx

from waypoint.exceptions import VertexNotFoundError
from waypoint.graph.types import Edge, Vertex, validate_weight

T = TypeVar("T")


class RustworkxGraph(Generic[T]):
    """Directed weighted graph wrapping a ``rustworkx.PyDiGraph``.

    Node payloads are stored as rustworkx node data and weights as edge
    data.  The underlying graph is created with ``multigraph=False`` so
    re-adding an edge updates its weight instead of duplicating it.
    Vertices are never removed, so rustworkx indices are dense and map
    one-to-one onto ``Vertex.index``.

    Implements the ``WeightedGraph`` and ``SupportsMutation`` protocols.
    """

    def __init__(self) -> None:
        self._graph: rustworkx.PyDiGraph = rustworkx.PyDiGraph(multigraph=False)

    # ------------------------------------------------------------------
    # Vertex operations
    # ------------------------------------------------------------------

    def create_vertex(self, data: T) -> Vertex[T]:
        """Append a vertex carrying *data* and return its handle."""
        idx = self._graph.add_node(data)
        return Vertex(idx, data)

    def vertices(self) -> list[Vertex[T]]:
        """Return all vertices in index order."""
        return [Vertex(idx, self._graph[idx]) for idx in self._graph.node_indices()]

    def has_vertex(self, vertex: Vertex[Any]) -> bool:
        """Return whether *vertex* belongs to this graph."""
        return 0 <= vertex.index < self._graph.num_nodes()

    # ------------------------------------------------------------------
    # Edge operations
    # ------------------------------------------------------------------

    def add_directed_edge(
        self, source: Vertex[T], target: Vertex[T], weight: float = 1.0
    ) -> None:
        """Add or update the edge *source* → *target*."""
        src = self._require_vertex(source)
        tgt = self._require_vertex(target)
        self._graph.add_edge(src, tgt, validate_weight(weight))

    def add_undirected_edge(
        self, first: Vertex[T], second: Vertex[T], weight: float = 1.0
    ) -> None:
        """Add edges in both directions with the same *weight*."""
        self.add_directed_edge(first, second, weight)
        self.add_directed_edge(second, first, weight)

    def edges_from(self, vertex: Vertex[T]) -> list[Edge[T]]:
        """Outgoing edges of *vertex* in reverse insertion order (as rustworkx reports them)."""
        src = self._require_vertex(vertex)
        source = Vertex(src, self._graph[src])
        return [
            Edge(source, Vertex(tgt, self._graph[tgt]), weight)
            for _src, tgt, weight in self._graph.out_edges(src)
        ]

    def weight_between(self, source: Vertex[T], target: Vertex[T]) -> float | None:
        """Weight of the edge *source* → *target*, or ``None`` if absent."""
        src = self._require_vertex(source)
        tgt = self._require_vertex(target)
        try:
            return self._graph.get_edge_data(src, tgt)
        except rustworkx.NoEdgeBetweenNodes:
            return None

    # ------------------------------------------------------------------
    # Graph-level
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        """Number of directed edges in the graph."""
        return self._graph.num_edges()

    def __repr__(self) -> str:
        return f"RustworkxGraph(vertices={self.vertex_count}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_vertex(self, vertex: Vertex[Any]) -> int:
        """Return the rustworkx index for *vertex*, or raise ``VertexNotFoundError``."""
        if not self.has_vertex(vertex):
            msg = f"Vertex not found: {vertex!r}"
            raise VertexNotFoundError(msg)
        return vertex.index
