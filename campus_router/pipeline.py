"""Stateless routing pipeline.

The pipeline runs the four stages of a routing request in order:

1. Graph construction from the path segments (snapping endpoints).
2. Nearest-node lookup for the origin and the destination.
3. Shortest-path search (Dijkstra).
4. Route assembly with the unsnapped endpoints.

Nothing is cached or shared between calls. Use CampusRouteService when
segments come from a repository or graphs should be cached.
"""

from typing import Any, Dict, Iterable, List, Sequence

from .domain.models import PathSegment, Point, Route
from .graph.assembler import assemble_route
from .graph.builder import DEFAULT_SNAP_TOLERANCE_M, build_graph
from .graph.dijkstra import get_search_strategy
from .graph.distance import get_distance_function
from .graph.locator import locate_nearest_node


def find_route(
    origin: Point,
    destination: Point,
    segments: Iterable[PathSegment],
    *,
    snap_tolerance_m: float = DEFAULT_SNAP_TOLERANCE_M,
    metric: str = "haversine",
    frontier: str = "heap",
) -> Route:
    """Find the shortest walkable route between two coordinates.

    Returns an empty Route when there are no segments or when the two
    ends snap to disconnected parts of the network.
    """
    distance_fn = get_distance_function(metric)
    search = get_search_strategy(frontier)

    graph = build_graph(segments, snap_tolerance_m, distance_fn)

    start = locate_nearest_node(graph, origin, distance_fn)
    end = locate_nearest_node(graph, destination, distance_fn)
    if start is None or end is None:
        return Route.empty()

    tree = search(graph, start.id, end.id)
    return assemble_route(tree, end.id, graph, origin, destination)


def find_route_coordinates(
    origin: Any,
    destination: Any,
    segments: Sequence[Sequence[Any]],
    **options: Any,
) -> List[Dict[str, float]]:
    """Same as find_route(), over raw ``{lat, lng}`` data.

    Returns a list of ``{lat, lng}`` dicts; empty means no route.
    """
    route = find_route(
        Point.from_raw(origin),
        Point.from_raw(destination),
        [PathSegment.from_raw(s) for s in segments],
        **options,
    )
    return route.as_dicts()
