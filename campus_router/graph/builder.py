"""Route graph construction from hand-drawn path segments.

Segments are drawn independently, so their endpoints rarely coincide
exactly. Each raw coordinate is snapped to the first existing node
within the snap tolerance, which is what joins separate segments into
one walkable network.
"""

import math
from typing import Iterable, List

from ..domain.models import Graph, GraphNode, PathSegment, Point
from .distance import DistanceFunction, haversine_m

DEFAULT_SNAP_TOLERANCE_M = 15.0


def build_graph(
    segments: Iterable[PathSegment],
    snap_tolerance_m: float = DEFAULT_SNAP_TOLERANCE_M,
    distance_fn: DistanceFunction = haversine_m,
) -> Graph:
    """Build an undirected weighted graph from path segments.

    Parameters
    ----------
    segments:
        Walkable polylines. Segments with fewer than two points add
        nothing to the graph.
    snap_tolerance_m:
        Two coordinates share a node when their distance is strictly
        less than this value.
    distance_fn:
        Metric used both for snapping and for edge weights.

    Returns
    -------
    Graph
        Nodes in creation order. Merging is first-match and single pass,
        so the result depends on segment order (a chain A~B~C can merge
        or not depending on which node came first).
    """
    if not math.isfinite(snap_tolerance_m) or snap_tolerance_m < 0:
        raise ValueError(
            f"Snap tolerance must be a finite non-negative number, got {snap_tolerance_m}"
        )

    nodes: List[GraphNode] = []
    graph = Graph(snap_tolerance_m=snap_tolerance_m)

    def get_or_create(point: Point) -> GraphNode:
        for node in nodes:
            if distance_fn(node.location, point) < snap_tolerance_m:
                return node
        node = GraphNode(id=f"node_{len(nodes)}", location=point)
        nodes.append(node)
        graph.nodes[node.id] = node
        return node

    for segment in segments:
        for u, v in segment.edges():
            u_node = get_or_create(u)
            v_node = get_or_create(v)
            # Weight comes from the raw coordinates, not the snapped ones.
            weight = distance_fn(u, v)
            u_node.neighbors.append((v_node.id, weight))
            v_node.neighbors.append((u_node.id, weight))

    return graph
