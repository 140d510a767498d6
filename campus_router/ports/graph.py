"""Graph ports - Abstractions for graph construction and routing.

These protocols define the contracts between the route service and
the graph adapters, so builders and solvers can be swapped or mocked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol

if TYPE_CHECKING:
    from ..domain.models import Graph, PathSegment, Point, Route


class GraphBuilderPort(Protocol):
    """Port for turning path segments into a route graph.

    Implementation: adapters/graph/snap_builder.py
    """

    def build(self, segments: Iterable[PathSegment]) -> Graph:
        """Build the snapped, undirected route graph.

        Args:
            segments: Walkable polylines for the current request.

        Returns:
            A graph that callers must treat as read-only.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation between two coordinates.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: Graph, origin: Point, destination: Point) -> Route:
        """Find the shortest route, raising typed errors when there is none."""
        ...

    def solve_safe(self, graph: Graph, origin: Point, destination: Point) -> Route:
        """Find the shortest route, returning an empty Route when there is none."""
        ...
