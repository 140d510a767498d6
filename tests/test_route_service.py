"""Tests for CampusRouteService wired with in-memory adapters."""

import pytest

from campus_router.adapters.cache import InMemoryCache
from campus_router.adapters.graph import DijkstraRouteSolver, SnapGraphBuilder
from campus_router.adapters.segments import InMemorySegmentRepository
from campus_router.config import RoutingConfig
from campus_router.domain.models import PathSegment, Point
from campus_router.services import CampusRouteService

RAW_PATHS = [
    [{"lat": 0, "lng": 0}, {"lat": 0, "lng": 100}],
    [[0, 100], [80, 100]],
    [[200, 200], [200, 300]],
]


@pytest.fixture
def routing_config():
    return RoutingConfig(snap_tolerance_m=15.0, distance_metric="planar", frontier="linear")


@pytest.fixture
def cache():
    return InMemoryCache(name="test-graphs", max_size=4)


@pytest.fixture
def service(routing_config, cache):
    return CampusRouteService(
        segment_repository=InMemorySegmentRepository.from_raw(RAW_PATHS),
        graph_builder=SnapGraphBuilder(routing_config, cache),
        route_solver=DijkstraRouteSolver(routing_config),
    )


def test_find_route_over_repository_segments(service):
    route = service.find_route(Point(0, -5), Point(80, 103))

    assert route.points == (
        Point(0, -5),
        Point(0, 0),
        Point(0, 100),
        Point(80, 100),
        Point(80, 103),
    )
    assert route.network_distance_m == 180.0


def test_disconnected_destination_returns_empty_route(service):
    route = service.find_route(Point(0, 0), Point(200, 250))

    assert route.is_empty


def test_explicit_segments_override_repository(service):
    segments = [PathSegment.from_raw([[0, 0], [0, 30]])]

    route = service.find_route(Point(0, 0), Point(0, 30), segments=segments)

    assert route.points[-2] == Point(0, 30)


def test_empty_segment_set_returns_empty_route(service):
    assert service.find_route(Point(0, 0), Point(1, 1), segments=[]).is_empty


def test_graph_is_reused_for_unchanged_segments(service, cache):
    service.find_route(Point(0, 0), Point(80, 100))
    service.find_route(Point(80, 100), Point(0, 0))

    stats = cache.stats()
    assert stats["size"] == 1
    assert stats["hits"] == 1


def test_repository_edit_builds_new_graph(service, cache):
    service.find_route(Point(0, 0), Point(80, 100))
    service.segment_repository.replace(
        list(service.segment_repository.load()) + [PathSegment.from_raw([[80, 100], [200, 200]])]
    )

    route = service.find_route(Point(0, 0), Point(200, 300))

    assert not route.is_empty
    assert cache.size() == 2


def test_find_route_coordinates(service):
    coords = service.find_route_coordinates({"lat": 0, "lng": 0}, {"lat": 80, "lng": 100})

    assert coords[0] == {"lat": 0.0, "lng": 0.0}
    assert coords[-1] == {"lat": 80.0, "lng": 100.0}
    assert len(coords) == 5


def test_find_route_coordinates_no_route(service):
    assert service.find_route_coordinates([0, 0], [200, 300], segments=[]) == []
