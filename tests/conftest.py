"""Shared fixtures for waypoint tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from waypoint.graph import AdjacencyListGraph, AdjacencyMatrixGraph, RustworkxGraph

if TYPE_CHECKING:
    from waypoint.graph.types import Vertex

BACKENDS = [AdjacencyListGraph, AdjacencyMatrixGraph, RustworkxGraph]


class VisitRecorder:
    """Records the payloads passed to a search's ``on_visit`` observer."""

    def __init__(self) -> None:
        self.visited: list[Any] = []

    def __call__(self, vertex: Vertex[Any]) -> None:
        self.visited.append(vertex.data)

    def __contains__(self, data: object) -> bool:
        return data in self.visited


@pytest.fixture(params=BACKENDS, ids=lambda cls: cls.__name__)
def graph_cls(request: pytest.FixtureRequest) -> type:
    """Each bundled mutable backend class."""
    return request.param


@pytest.fixture
def graph(graph_cls: type) -> Any:
    """A fresh, empty graph of each bundled backend."""
    return graph_cls()


@pytest.fixture
def recorder() -> VisitRecorder:
    return VisitRecorder()
