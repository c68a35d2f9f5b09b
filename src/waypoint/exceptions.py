"""Custom exception hierarchy for waypoint."""


class WaypointError(Exception):
    """Base exception for all waypoint errors."""


class VertexNotFoundError(WaypointError, KeyError):
    """Raised when a vertex does not belong to the graph it is used with."""


class ConsistencyError(WaypointError):
    """Raised when a graph backend contradicts itself (e.g. an edge with no weight)."""


class NegativeWeightError(WaypointError, ValueError):
    """Raised when an edge weight is negative or not a number."""
