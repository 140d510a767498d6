"""Distance functions between two points.

Every metric returns meters (or raw coordinate units for ``planar``),
is symmetric and returns 0 for identical points. The same function is
used to snap coordinates and to weight edges.
"""

import math
from typing import Callable, Dict

from geopy.distance import geodesic

from ..domain.errors import ConfigurationError
from ..domain.models import Point

DistanceFunction = Callable[[Point, Point], float]

# Mean earth radius used by web map libraries for ``distanceTo``.
EARTH_RADIUS_M = 6_371_000.0


def haversine_m(a: Point, b: Point) -> float:
    """Great-circle distance in meters on a spherical earth."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlng = math.radians(b.lng - a.lng)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(h)))


def geodesic_m(a: Point, b: Point) -> float:
    """Ellipsoidal (WGS-84) distance in meters."""
    return geodesic((a.lat, a.lng), (b.lat, b.lng)).meters


def planar_distance(a: Point, b: Point) -> float:
    """Euclidean distance on the raw coordinate values.

    Meant for projected or synthetic grids where one unit is one meter.
    """
    return math.hypot(b.lat - a.lat, b.lng - a.lng)


DISTANCE_FUNCTIONS: Dict[str, DistanceFunction] = {
    "haversine": haversine_m,
    "geodesic": geodesic_m,
    "planar": planar_distance,
}


def get_distance_function(metric: str) -> DistanceFunction:
    """Resolve a metric name to its distance function.

    Raises:
        ConfigurationError: If the metric is unknown.
    """
    try:
        return DISTANCE_FUNCTIONS[metric]
    except KeyError as e:
        raise ConfigurationError(
            f"Unknown distance metric: {metric!r}",
            setting_name="distance_metric",
            expected_type=" | ".join(DISTANCE_FUNCTIONS),
            cause=e,
        ) from e
