"""Snapping graph builder adapter.

This adapter wraps graph/builder.py and adds:
- Configuration injection (snap tolerance, distance metric)
- Graph caching keyed by a fingerprint of the segment set
- Logging
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ...config import RoutingConfig, get_config
from ...domain.models import Graph, PathSegment
from ...graph.builder import build_graph
from ...graph.distance import DistanceFunction, get_distance_function
from ...ports.cache import CachePort
from ..cache.null_cache import NullCache


def segment_set_fingerprint(
    segments: Sequence[PathSegment], snap_tolerance_m: float, metric: str
) -> str:
    """Stable key for a segment set and the parameters that shape its graph.

    Segment order is part of the key because snapping is order dependent.
    """
    payload = {
        "tolerance": snap_tolerance_m,
        "metric": metric,
        "segments": [[[p.lat, p.lng] for p in s.points] for s in segments],
    }
    encoded = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(encoded).hexdigest()


@dataclass
class SnapGraphBuilder:
    """Graph builder that implements GraphBuilderPort.

    Attributes:
        config: Routing configuration (tolerance, metric)
        cache: Cache for built graphs; NullCache rebuilds on every call
    """

    config: RoutingConfig = field(default_factory=lambda: get_config().routing)
    cache: CachePort[Graph] = field(default_factory=NullCache)

    _distance_fn: DistanceFunction = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._distance_fn = get_distance_function(self.config.distance_metric)

    @property
    def distance_fn(self) -> DistanceFunction:
        return self._distance_fn

    def build(self, segments: Iterable[PathSegment]) -> Graph:
        """Build (or reuse) the route graph for ``segments``.

        Args:
            segments: Walkable polylines for the current request. Any
                iterable is accepted; it is read once.

        Returns:
            The snapped graph. Shared with other callers when cached, so
            it must not be mutated.
        """
        segments = tuple(segments)
        key = segment_set_fingerprint(
            segments, self.config.snap_tolerance_m, self.config.distance_metric
        )
        return self.cache.get_or_compute(key, lambda: self._build(segments))

    def _build(self, segments: Sequence[PathSegment]) -> Graph:
        self._logger.debug(
            "Building route graph",
            extra={
                "segments": len(segments),
                "snap_tolerance_m": self.config.snap_tolerance_m,
                "metric": self.config.distance_metric,
            },
        )
        graph = build_graph(
            segments,
            snap_tolerance_m=self.config.snap_tolerance_m,
            distance_fn=self._distance_fn,
        )
        self._logger.info(
            "Route graph built",
            extra={"nodes": len(graph), "edges": graph.edge_count},
        )
        return graph
