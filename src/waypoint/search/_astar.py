"""A* shortest path search over any ``WeightedGraph``.

The frontier is a binary heap of ``(f_score, sequence, vertex)`` entries with
lazy invalidation: improving a vertex pushes a fresh entry and the superseded
one is discarded when it surfaces.  ``sequence`` is a per-search push counter,
so among entries with equal f-scores the one pushed first is expanded first.
Combined with the backend's ``edges_from`` order this makes the choice between
several equally short paths fully deterministic.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import TYPE_CHECKING, Any

from waypoint.exceptions import ConsistencyError, VertexNotFoundError
from waypoint.search.types import path_result

if TYPE_CHECKING:
    from waypoint.graph.protocols import WeightedGraph
    from waypoint.graph.types import Vertex
    from waypoint.search.protocols import Heuristic, VisitCallback
    from waypoint.search.types import PathResult

logger = logging.getLogger(__name__)


def find_path(
    graph: WeightedGraph,
    start: Vertex[Any],
    goal: Vertex[Any],
    heuristic: Heuristic,
    *,
    on_visit: VisitCallback | None = None,
) -> PathResult[Any] | None:
    """Find a minimum-weight path from *start* to *goal* with A*.

    Parameters
    ----------
    graph:
        Read-only weighted graph.  Must not be mutated during the call.
    start, goal:
        Vertices of *graph*.
    heuristic:
        ``heuristic(node, goal_node)`` over node payloads.  The result is
        optimal only if it never overestimates the remaining cost.
    on_visit:
        Called once with each vertex at the moment it is selected for
        expansion, the goal included.  Purely observational.

    Returns
    -------
    The path and its total distance, or ``None`` if *goal* is unreachable.

    Raises
    ------
    VertexNotFoundError
        If *start* or *goal* is not a vertex of *graph*.
    ConsistencyError
        If *graph* reports an edge during traversal but no weight for it
        during path reconstruction.
    """
    stored = {v.index: v.data for v in graph.vertices()}
    for role, vertex in (("start", start), ("goal", goal)):
        # Same index is not enough: a handle from another graph must carry this graph's payload
        if vertex.index not in stored or not _same_payload(stored[vertex.index], vertex.data):
            msg = f"{role.capitalize()} vertex not in graph: {vertex!r}"
            raise VertexNotFoundError(msg)

    logger.debug("A* search from %r to %r", start, goal)

    sequence = itertools.count()
    g_score: dict[Vertex[Any], float] = {start: 0.0}
    f_score: dict[Vertex[Any], float] = {start: heuristic(start.data, goal.data)}
    came_from: dict[Vertex[Any], Vertex[Any]] = {}
    open_set: set[Vertex[Any]] = {start}
    closed_set: set[Vertex[Any]] = set()
    frontier: list[tuple[float, int, Vertex[Any]]] = [(f_score[start], next(sequence), start)]
    expanded = 0

    while open_set:
        f, _seq, current = heapq.heappop(frontier)
        # Stale entry: already expanded, or re-pushed with a better score
        if current not in open_set or f > f_score[current]:
            continue

        if on_visit is not None:
            on_visit(current)
        expanded += 1

        if current == goal:
            result = _reconstruct(graph, came_from, current)
            logger.debug(
                "A* reached %r after %d expansions (distance=%s)",
                goal,
                expanded,
                result.distance,
            )
            return result

        open_set.remove(current)
        closed_set.add(current)

        current_g = g_score[current]
        for edge in graph.edges_from(current):
            neighbor = edge.target
            if neighbor in closed_set:
                continue
            tentative_g = current_g + edge.weight

            if neighbor not in open_set:
                open_set.add(neighbor)
            elif tentative_g >= g_score[neighbor]:
                continue

            came_from[neighbor] = current
            g_score[neighbor] = tentative_g
            f_score[neighbor] = tentative_g + heuristic(neighbor.data, goal.data)
            heapq.heappush(frontier, (f_score[neighbor], next(sequence), neighbor))

    logger.debug("A* found no path from %r to %r after %d expansions", start, goal, expanded)
    return None


def _same_payload(stored: Any, given: Any) -> bool:
    """Return whether *given* is the payload the graph holds for that vertex."""
    return stored is given or bool(stored == given)


def _reconstruct(
    graph: WeightedGraph,
    came_from: dict[Vertex[Any], Vertex[Any]],
    goal: Vertex[Any],
) -> PathResult[Any]:
    """Walk predecessors back from *goal* and total the edge weights."""
    current = goal
    vertices = [current]
    while current in came_from:
        current = came_from[current]
        vertices.append(current)
    vertices.reverse()

    distance = 0.0
    for v0, v1 in itertools.pairwise(vertices):
        weight = graph.weight_between(v0, v1)
        if weight is None:
            msg = f"Graph returned an edge from {v0!r} to {v1!r} but has no weight for it"
            raise ConsistencyError(msg)
        distance += weight
    return path_result(vertices, distance)


class AStar:
    """A* search as a reusable algorithm object.

    Satisfies the ``ShortestPathAlgorithm`` protocol.  A default *on_visit*
    observer given here applies to every search unless a call passes its own.

    Usage::

        astar = AStar()
        result = astar.find_path(graph, start, goal, heuristics.zero)
    """

    def __init__(self, *, on_visit: VisitCallback | None = None) -> None:
        self._on_visit = on_visit

    def find_path(
        self,
        graph: WeightedGraph,
        start: Vertex[Any],
        goal: Vertex[Any],
        heuristic: Heuristic,
        *,
        on_visit: VisitCallback | None = None,
    ) -> PathResult[Any] | None:
        """Run :func:`find_path` with this instance's default observer."""
        if on_visit is None:
            on_visit = self._on_visit
        return find_path(graph, start, goal, heuristic, on_visit=on_visit)

    def __repr__(self) -> str:
        return f"AStar(on_visit={self._on_visit!r})"
