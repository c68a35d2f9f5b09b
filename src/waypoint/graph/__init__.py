"""Graph layer — protocol-based weighted graph API and bundled backends."""

from waypoint.graph._adjacency_list import AdjacencyListGraph
from waypoint.graph._matrix import AdjacencyMatrixGraph
from waypoint.graph._rustworkx import RustworkxGraph
from waypoint.graph.protocols import SupportsMutation, WeightedGraph
from waypoint.graph.types import Edge, Vertex

__all__ = [
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "Edge",
    "RustworkxGraph",
    "SupportsMutation",
    "Vertex",
    "WeightedGraph",
]
