"""Services layer - Application orchestration.

Available services:
- CampusRouteService: Finds walkable routes between two coordinates
"""

from .route_service import CampusRouteService

__all__ = ["CampusRouteService"]
