"""Graph protocols — runtime-checkable interfaces for graph backends.

Split into a read-only core protocol and an opt-in mutation protocol so that
the search only ever depends on traversal and weight lookup.  Any
representation (adjacency matrix, adjacency list, a wrapped third-party
graph) can implement ``WeightedGraph`` without providing construction.

Capability protocols are opt-in and detected via ``isinstance()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from waypoint.graph.types import Edge, Vertex


@runtime_checkable
class WeightedGraph(Protocol):
    """Core read-only graph interface required by the path finders.

    Implementations must return, from ``weight_between``, a weight for every
    pair that ``edges_from`` reports as connected.
    """

    def vertices(self) -> list[Vertex[Any]]: ...
    def edges_from(self, vertex: Vertex[Any]) -> list[Edge[Any]]: ...
    def weight_between(self, source: Vertex[Any], target: Vertex[Any]) -> float | None: ...


@runtime_checkable
class SupportsMutation(Protocol):
    """Opt-in: vertex creation and edge insertion."""

    def create_vertex(self, data: Any) -> Vertex[Any]: ...
    def add_directed_edge(
        self, source: Vertex[Any], target: Vertex[Any], weight: float = 1.0
    ) -> None: ...
    def add_undirected_edge(
        self, first: Vertex[Any], second: Vertex[Any], weight: float = 1.0
    ) -> None: ...

    @property
    def vertex_count(self) -> int: ...
    @property
    def edge_count(self) -> int: ...
