"""Dijkstra route solver adapter.

This adapter chains the graph algorithms into one request:
nearest-node lookup for both ends, shortest-path search, route
assembly. It adds domain model output, typed errors and logging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...config import RoutingConfig, get_config
from ...domain.errors import NoRouteFoundError
from ...domain.models import Graph, Point, Route
from ...graph.assembler import assemble_route
from ...graph.dijkstra import ShortestPathSearch, get_search_strategy
from ...graph.distance import DistanceFunction, get_distance_function
from ...graph.locator import locate_nearest_node, locate_nearest_node_strict


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. The distance metric must
    match the one the graph was built with, so both are read from the
    same RoutingConfig.

    Attributes:
        config: Routing configuration (metric, frontier strategy)
    """

    config: RoutingConfig = field(default_factory=lambda: get_config().routing)

    _distance_fn: DistanceFunction = field(init=False, repr=False)
    _search: ShortestPathSearch = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._distance_fn = get_distance_function(self.config.distance_metric)
        self._search = get_search_strategy(self.config.frontier)

    def solve(self, graph: Graph, origin: Point, destination: Point) -> Route:
        """Find the shortest route between two coordinates.

        Args:
            graph: The snapped route graph.
            origin: Requested start coordinate (not snapped).
            destination: Requested end coordinate (not snapped).

        Returns:
            Route starting at ``origin`` and ending at ``destination``.

        Raises:
            EmptyGraphError: If the graph has no nodes.
            NoRouteFoundError: If the snapped nodes are not connected.
        """
        self._logger.debug(
            "Solving route",
            extra={"origin": origin.as_dict(), "destination": destination.as_dict()},
        )

        start = locate_nearest_node_strict(graph, origin, self._distance_fn)
        end = locate_nearest_node_strict(graph, destination, self._distance_fn)

        tree = self._search(graph, start.id, end.id)
        route = assemble_route(tree, end.id, graph, origin, destination)

        if route.is_empty:
            self._logger.warning(
                "No route found",
                extra={"start_node": start.id, "end_node": end.id},
            )
            raise NoRouteFoundError(
                f"No path from {start.id} to {end.id}",
                start_node=start.id,
                end_node=end.id,
            )

        self._logger.info(
            "Route found",
            extra={
                "start_node": start.id,
                "end_node": end.id,
                "points": len(route),
                "network_distance_m": route.network_distance_m,
            },
        )
        return route

    def solve_safe(self, graph: Graph, origin: Point, destination: Point) -> Route:
        """Find the shortest route, returning an empty Route on failure.

        Like solve(), but an empty graph or an unreachable destination
        yields ``Route.empty()`` instead of an exception.
        """
        start = locate_nearest_node(graph, origin, self._distance_fn)
        end = locate_nearest_node(graph, destination, self._distance_fn)
        if start is None or end is None:
            self._logger.warning("No route found", extra={"reason": "empty_graph"})
            return Route.empty()

        tree = self._search(graph, start.id, end.id)
        route = assemble_route(tree, end.id, graph, origin, destination)

        if route.is_empty:
            self._logger.warning(
                "No route found",
                extra={
                    "reason": "unreachable",
                    "start_node": start.id,
                    "end_node": end.id,
                },
            )
        return route
