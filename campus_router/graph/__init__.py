"""Graph algorithms for the campus path network.

This subpackage builds the snapped route graph from path segments,
locates nearest nodes, runs Dijkstra and assembles routes. Everything
here is a pure function over in-memory data.
"""

from .assembler import assemble_route, node_path
from .builder import DEFAULT_SNAP_TOLERANCE_M, build_graph
from .dijkstra import dijkstra, dijkstra_linear, get_search_strategy
from .distance import (
    DistanceFunction,
    geodesic_m,
    get_distance_function,
    haversine_m,
    planar_distance,
)
from .locator import locate_nearest_node, locate_nearest_node_strict

__all__ = [
    "DistanceFunction",
    "haversine_m",
    "geodesic_m",
    "planar_distance",
    "get_distance_function",
    "DEFAULT_SNAP_TOLERANCE_M",
    "build_graph",
    "locate_nearest_node",
    "locate_nearest_node_strict",
    "dijkstra",
    "dijkstra_linear",
    "get_search_strategy",
    "node_path",
    "assemble_route",
]
