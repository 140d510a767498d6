"""Turn a shortest-path tree into the coordinates handed to the map."""

from typing import List

from ..domain.models import Graph, Point, Route, ShortestPathTree


def node_path(tree: ShortestPathTree, end: str) -> List[str]:
    """Return node ids from the tree's start to ``end`` (empty if unreached)."""
    if not tree.reaches(end):
        return []

    path: List[str] = [end]
    current = end
    while current != tree.start:
        current = tree.predecessors[current]
        path.append(current)

    path.reverse()
    return path


def assemble_route(
    tree: ShortestPathTree,
    end: str,
    graph: Graph,
    origin: Point,
    destination: Point,
) -> Route:
    """Build the route ``[origin, *node locations, destination]``.

    The true origin and destination bracket the snapped nodes so the
    drawn line starts and ends where the user asked, not at the nearest
    node. A single shared node is kept between two distinct endpoints;
    only a request whose origin equals its destination collapses to
    ``[origin, destination]``. Returns an empty route when ``end`` was
    never reached.
    """
    path = node_path(tree, end)
    if not path:
        return Route.empty()

    if len(path) == 1 and origin == destination:
        # Nothing to walk.
        return Route(points=(origin, destination), network_distance_m=0.0)

    points = [origin]
    points.extend(graph.location_of(node_id) for node_id in path)
    points.append(destination)
    return Route(points=tuple(points), network_distance_m=tree.distance_to(end))
