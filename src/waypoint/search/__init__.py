"""Search layer — A* shortest paths over ``WeightedGraph`` backends."""

from waypoint.search import heuristics
from waypoint.search._astar import AStar, find_path
from waypoint.search.protocols import Heuristic, ShortestPathAlgorithm, VisitCallback
from waypoint.search.types import PathResult

__all__ = [
    "AStar",
    "Heuristic",
    "PathResult",
    "ShortestPathAlgorithm",
    "VisitCallback",
    "find_path",
    "heuristics",
]
