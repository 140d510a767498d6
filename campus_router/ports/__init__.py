"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the route service and the adapters
that load segments, build graphs, solve routes and cache results.
"""

from .cache import CachePort
from .graph import GraphBuilderPort, RouteSolverPort
from .segments import SegmentRepositoryPort

__all__ = [
    "SegmentRepositoryPort",
    "GraphBuilderPort",
    "RouteSolverPort",
    "CachePort",
]
