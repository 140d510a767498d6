"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- SnapGraphBuilder: Builds snapped route graphs, optionally cached
- DijkstraRouteSolver: Finds shortest routes using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .snap_builder import SnapGraphBuilder, segment_set_fingerprint

__all__ = ["SnapGraphBuilder", "DijkstraRouteSolver", "segment_set_fingerprint"]
