"""Top-level package for the campus route finder.

Given hand-drawn walkable path segments, this package snaps them into a
route graph and returns the shortest route between two coordinates as
an ordered list of points ready to draw on a map.
"""

from .domain.models import PathSegment, Point, Route
from .pipeline import find_route, find_route_coordinates

__all__ = ["Point", "PathSegment", "Route", "find_route", "find_route_coordinates"]
