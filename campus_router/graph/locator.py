"""Snap an arbitrary coordinate to the closest graph node."""

import math
from typing import Optional

from ..domain.errors import EmptyGraphError
from ..domain.models import Graph, GraphNode, Point
from .distance import DistanceFunction, haversine_m


def locate_nearest_node(
    graph: Graph,
    point: Point,
    distance_fn: DistanceFunction = haversine_m,
) -> Optional[GraphNode]:
    """Return the node closest to ``point``, or None for an empty graph.

    Ties go to the node created first.
    """
    nearest: Optional[GraphNode] = None
    best = math.inf

    for node in graph:
        d = distance_fn(node.location, point)
        if d < best:
            best = d
            nearest = node

    return nearest


def locate_nearest_node_strict(
    graph: Graph,
    point: Point,
    distance_fn: DistanceFunction = haversine_m,
) -> GraphNode:
    """Like locate_nearest_node(), but raise EmptyGraphError instead of returning None."""
    node = locate_nearest_node(graph, point, distance_fn)
    if node is None:
        raise EmptyGraphError(f"Cannot snap ({point.lat}, {point.lng}): graph has no nodes")
    return node
