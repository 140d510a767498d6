"""Single-source shortest paths using Dijkstra's algorithm.

Two frontier strategies share one contract. ``dijkstra`` keeps the
frontier in a binary heap; ``dijkstra_linear`` scans every unsettled
node for the minimum, which is plenty for campus-sized graphs (tens to
a few hundred nodes). Both break ties by node creation order, so the
predecessor tree is deterministic.
"""

import heapq
import math
from typing import Callable, Dict, List, Optional, Tuple

from ..domain.errors import ConfigurationError
from ..domain.models import Graph, ShortestPathTree

ShortestPathSearch = Callable[[Graph, str, Optional[str]], ShortestPathTree]


def dijkstra(graph: Graph, start: str, end: Optional[str] = None) -> ShortestPathTree:
    """Compute shortest distances from ``start`` with a heap-backed frontier.

    Parameters
    ----------
    graph:
        Route graph as produced by ``build_graph``.
    start:
        Id of the source node.
    end:
        Optional destination id. The search stops as soon as it is
        settled; without it every reachable node is settled.

    Returns
    -------
    ShortestPathTree
        Distances (``inf`` for unreached nodes) and predecessor links.
    """
    if start not in graph:
        raise KeyError(f"Start node not in graph: {start}")

    order: Dict[str, int] = {node_id: i for i, node_id in enumerate(graph.nodes)}
    distances: Dict[str, float] = {node_id: math.inf for node_id in graph.nodes}
    previous: Dict[str, str] = {}
    distances[start] = 0.0

    heap: List[Tuple[float, int, str]] = [(0.0, order[start], start)]
    settled: List[str] = []
    visited = set()

    while heap:
        current_distance, _, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)
        settled.append(u)

        if u == end:
            break

        for v, weight in graph.nodes[u].neighbors:
            new_distance = current_distance + weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, order[v], v))

    return ShortestPathTree(
        start=start,
        distances=distances,
        predecessors=previous,
        settled=tuple(settled),
    )


def dijkstra_linear(
    graph: Graph, start: str, end: Optional[str] = None
) -> ShortestPathTree:
    """Compute shortest distances from ``start`` with a linear-scan frontier.

    Same contract as ``dijkstra``.
    """
    if start not in graph:
        raise KeyError(f"Start node not in graph: {start}")

    distances: Dict[str, float] = {node_id: math.inf for node_id in graph.nodes}
    previous: Dict[str, str] = {}
    distances[start] = 0.0

    unsettled: List[str] = list(graph.nodes)
    settled: List[str] = []

    while unsettled:
        # min() keeps the first of equal keys, i.e. creation order.
        u = min(unsettled, key=distances.__getitem__)
        if math.isinf(distances[u]):
            break

        unsettled.remove(u)
        settled.append(u)

        if u == end:
            break

        for v, weight in graph.nodes[u].neighbors:
            alt = distances[u] + weight
            if alt < distances[v]:
                distances[v] = alt
                previous[v] = u

    return ShortestPathTree(
        start=start,
        distances=distances,
        predecessors=previous,
        settled=tuple(settled),
    )


FRONTIER_STRATEGIES: Dict[str, ShortestPathSearch] = {
    "heap": dijkstra,
    "linear": dijkstra_linear,
}


def get_search_strategy(name: str) -> ShortestPathSearch:
    """Resolve a frontier strategy name.

    Raises:
        ConfigurationError: If the strategy is unknown.
    """
    try:
        return FRONTIER_STRATEGIES[name]
    except KeyError as e:
        raise ConfigurationError(
            f"Unknown frontier strategy: {name!r}",
            setting_name="frontier",
            expected_type=" | ".join(FRONTIER_STRATEGIES),
            cause=e,
        ) from e
