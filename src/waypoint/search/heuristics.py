"""Stock heuristics for A* search.

Every heuristic takes ``(node, goal)`` node payloads and returns a
non-negative estimate.  ``euclidean`` and ``manhattan`` expect payloads to be
equal-length sequences of numbers (e.g. ``(x, y)`` tuples).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from waypoint.search.protocols import Heuristic


def zero(node: Any, goal: Any) -> float:
    """Always ``0.0``, which makes A* behave as Dijkstra's algorithm."""
    return 0.0


def constant(value: float) -> Heuristic:
    """Return a heuristic that ignores its arguments and yields *value*."""
    estimate = float(value)
    if math.isnan(estimate) or estimate < 0:
        msg = f"Heuristic value must be non-negative, got {value!r}"
        raise ValueError(msg)

    def _constant(node: Any, goal: Any) -> float:
        return estimate

    return _constant


def euclidean(node: Sequence[float], goal: Sequence[float]) -> float:
    """Straight-line distance between two coordinate sequences."""
    return math.dist(node, goal)


def manhattan(node: Sequence[float], goal: Sequence[float]) -> float:
    """Sum of absolute coordinate differences."""
    if len(node) != len(goal):
        msg = f"Coordinate dimensions differ: {len(node)} != {len(goal)}"
        raise ValueError(msg)
    return float(sum(abs(a - b) for a, b in zip(node, goal, strict=True)))


def scaled(heuristic: Heuristic, factor: float) -> Heuristic:
    """Return *heuristic* multiplied by *factor*.

    A factor below ``1.0`` keeps an admissible heuristic admissible.
    """
    if factor < 0:
        msg = f"Scale factor must be non-negative, got {factor!r}"
        raise ValueError(msg)

    def _scaled(node: Any, goal: Any) -> float:
        return factor * heuristic(node, goal)

    return _scaled
