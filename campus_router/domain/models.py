"""Immutable domain models for the campus route finder.

Points, segments and routes are frozen dataclasses with slots. Graph
nodes are the one mutable type: the graph builder fills in their
neighbor lists, and nothing touches them once the graph is returned.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Mapping, Sequence, Tuple


@dataclass(frozen=True, slots=True)
class Point:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        """Reject coordinates that cannot be compared by distance."""
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            raise ValueError(
                f"Coordinates must be finite, got ({self.lat}, {self.lng})"
            )

    @classmethod
    def from_raw(cls, raw: Any) -> Point:
        """Build a point from a ``{lat, lng}`` mapping or a ``[lat, lng]`` pair."""
        if isinstance(raw, Point):
            return raw
        if isinstance(raw, Mapping):
            return cls(lat=float(raw["lat"]), lng=float(raw["lng"]))
        lat, lng = raw
        return cls(lat=float(lat), lng=float(lng))

    def as_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A hand-drawn walkable polyline.

    Attributes:
        points: Ordered points; each consecutive pair is a traversable edge.
    """

    points: Tuple[Point, ...]

    @classmethod
    def from_raw(cls, raw: Sequence[Any]) -> PathSegment:
        return cls(points=tuple(Point.from_raw(p) for p in raw))

    def edges(self) -> Iterator[Tuple[Point, Point]]:
        """Yield consecutive point pairs (nothing for fewer than two points)."""
        for i in range(len(self.points) - 1):
            yield self.points[i], self.points[i + 1]

    def __len__(self) -> int:
        return len(self.points)


@dataclass(slots=True)
class GraphNode:
    """A snapped location in the route graph.

    Attributes:
        id: Node identifier, ``node_<n>`` in creation order
        location: The first raw coordinate that created the node
        neighbors: (neighbor id, edge weight in meters) pairs
    """

    id: str
    location: Point
    neighbors: List[Tuple[str, float]] = field(default_factory=list)


@dataclass
class Graph:
    """Undirected weighted graph for a single routing computation.

    Attributes:
        nodes: Node id -> node, in creation order
        snap_tolerance_m: Tolerance the graph was built with
    """

    nodes: Dict[str, GraphNode] = field(default_factory=dict)
    snap_tolerance_m: float = 0.0

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self.nodes.values())

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    @property
    def edge_count(self) -> int:
        """Number of undirected edges, duplicates included."""
        return sum(len(n.neighbors) for n in self.nodes.values()) // 2

    def adjacency(self) -> Dict[str, List[Tuple[str, float]]]:
        """Return a plain ``node id -> [(neighbor, weight)]`` mapping."""
        return {node_id: list(n.neighbors) for node_id, n in self.nodes.items()}

    def location_of(self, node_id: str) -> Point:
        return self.nodes[node_id].location


@dataclass(frozen=True, slots=True)
class ShortestPathTree:
    """Result of a single-source shortest-path search.

    Attributes:
        start: Id of the source node
        distances: Best known distance from the source per node id
        predecessors: Previous node on the best path, per reached node id
        settled: Ids whose distance is final, in settlement order
    """

    start: str
    distances: Mapping[str, float]
    predecessors: Mapping[str, str]
    settled: Tuple[str, ...] = ()

    def distance_to(self, node_id: str) -> float:
        return self.distances.get(node_id, math.inf)

    def reaches(self, node_id: str) -> bool:
        return math.isfinite(self.distance_to(node_id))


@dataclass(frozen=True, slots=True)
class Route:
    """Ordered coordinates to render as a polyline.

    An empty route means no route exists between the requested points.

    Attributes:
        points: ``origin, <snapped nodes...>, destination``
        network_distance_m: Graph distance between the snapped start and end nodes
    """

    points: Tuple[Point, ...] = ()
    network_distance_m: float = math.inf

    @classmethod
    def empty(cls) -> Route:
        return cls()

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    @property
    def origin(self) -> Point:
        return self.points[0]

    @property
    def destination(self) -> Point:
        return self.points[-1]

    def total_distance_m(self, distance_fn: Callable[[Point, Point], float]) -> float:
        """Sum ``distance_fn`` over consecutive points (inf for an empty route)."""
        if self.is_empty:
            return math.inf
        return sum(
            distance_fn(self.points[i], self.points[i + 1])
            for i in range(len(self.points) - 1)
        )

    def as_dicts(self) -> List[Dict[str, float]]:
        return [p.as_dict() for p in self.points]

    def __len__(self) -> int:
        return len(self.points)
