"""Domain layer - Core routing models and errors.

This module contains the value types and typed errors used throughout
the application. No external dependencies.
"""

from .errors import (
    CampusRouterError,
    ConfigurationError,
    EmptyGraphError,
    NoRouteFoundError,
    SegmentDataError,
)
from .models import Graph, GraphNode, PathSegment, Point, Route, ShortestPathTree

__all__ = [
    # Models
    "Point",
    "PathSegment",
    "GraphNode",
    "Graph",
    "ShortestPathTree",
    "Route",
    # Errors
    "CampusRouterError",
    "SegmentDataError",
    "EmptyGraphError",
    "NoRouteFoundError",
    "ConfigurationError",
]
