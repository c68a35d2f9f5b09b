"""waypoint: A* shortest paths over pluggable weighted graphs.

Generic over node payloads, with a read-only graph protocol and
interchangeable adjacency-list, adjacency-matrix and rustworkx backends.
"""

__version__ = "0.1.0"

from waypoint.exceptions import (
    ConsistencyError,
    NegativeWeightError,
    VertexNotFoundError,
    WaypointError,
)
from waypoint.graph import (
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    Edge,
    RustworkxGraph,
    SupportsMutation,
    Vertex,
    WeightedGraph,
)
from waypoint.search import (
    AStar,
    Heuristic,
    PathResult,
    ShortestPathAlgorithm,
    VisitCallback,
    find_path,
    heuristics,
)

__all__ = [
    "AStar",
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "ConsistencyError",
    "Edge",
    "Heuristic",
    "NegativeWeightError",
    "PathResult",
    "RustworkxGraph",
    "ShortestPathAlgorithm",
    "SupportsMutation",
    "Vertex",
    "VertexNotFoundError",
    "VisitCallback",
    "WaypointError",
    "WeightedGraph",
    "__version__",
    "find_path",
    "heuristics",
]
