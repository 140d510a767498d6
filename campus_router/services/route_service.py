"""Campus route service - Main orchestrator.

One call runs the whole routing request: load segments, build (or
reuse) the graph, snap both ends, search and assemble. Expected
outcomes such as an empty segment set or disconnected paths come back
as an empty Route, never as an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..domain.models import PathSegment, Point, Route
from ..ports.graph import GraphBuilderPort, RouteSolverPort
from ..ports.segments import SegmentRepositoryPort


@dataclass
class CampusRouteService:
    """Main service for finding walkable routes on campus.

    Attributes:
        segment_repository: Supplies the current path segments
        graph_builder: Turns segments into a snapped route graph
        route_solver: Computes the shortest route on that graph
    """

    segment_repository: SegmentRepositoryPort
    graph_builder: GraphBuilderPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_route(
        self,
        origin: Point,
        destination: Point,
        segments: Optional[Sequence[PathSegment]] = None,
    ) -> Route:
        """Find the shortest walkable route between two coordinates.

        Args:
            origin: Where the user is (or tapped).
            destination: Where the user wants to go.
            segments: Segment set to route over. Defaults to the repository's.

        Returns:
            Route from ``origin`` to ``destination``, or an empty Route
            when no route exists. Callers render their own fallback.

        Raises:
            SegmentDataError: If the repository cannot load segments.
        """
        if segments is None:
            segments = self.segment_repository.load()

        self._logger.info(
            "Starting route request",
            extra={
                "origin": origin.as_dict(),
                "destination": destination.as_dict(),
                "segments": len(segments),
            },
        )

        graph = self.graph_builder.build(segments)
        route = self.route_solver.solve_safe(graph, origin, destination)

        self._logger.info(
            "Route request finished",
            extra={"found": not route.is_empty, "points": len(route)},
        )
        return route

    def find_route_coordinates(
        self,
        origin: Any,
        destination: Any,
        segments: Optional[Sequence[Any]] = None,
    ) -> List[Dict[str, float]]:
        """Route over raw ``{lat, lng}`` data and return ``{lat, lng}`` dicts.

        This is the shape map front-ends exchange. An empty list means
        no route.
        """
        parsed: Optional[List[PathSegment]] = None
        if segments is not None:
            parsed = [PathSegment.from_raw(s) for s in segments]

        route = self.find_route(
            Point.from_raw(origin), Point.from_raw(destination), parsed
        )
        return route.as_dicts()
