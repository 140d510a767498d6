"""Tests for the snapping graph builder and the Dijkstra solver adapters."""

import logging

import pytest

from campus_router.adapters.cache import InMemoryCache, NullCache
from campus_router.adapters.graph import (
    DijkstraRouteSolver,
    SnapGraphBuilder,
    segment_set_fingerprint,
)
from campus_router.config import RoutingConfig
from campus_router.domain.errors import EmptyGraphError, NoRouteFoundError
from campus_router.domain.models import Graph, PathSegment, Point

SEGMENTS = [
    PathSegment.from_raw([[0, 0], [0, 50]]),
    PathSegment.from_raw([[0, 55], [0, 100]]),
    PathSegment.from_raw([[500, 500], [500, 600]]),
]


@pytest.fixture
def config():
    return RoutingConfig(snap_tolerance_m=15.0, distance_metric="planar")


class TestSnapGraphBuilder:
    def test_builds_snapped_graph(self, config):
        graph = SnapGraphBuilder(config).build(SEGMENTS)

        assert len(graph) == 5
        assert graph.snap_tolerance_m == 15.0

    @pytest.mark.parametrize("cache", [NullCache(), InMemoryCache(name="graphs")])
    def test_reads_generator_segments_once(self, config, cache):
        graph = SnapGraphBuilder(config, cache).build(s for s in SEGMENTS)

        assert len(graph) == 5
        assert graph.edge_count == 3

    def test_generator_and_list_share_cache_entry(self, config):
        cache = InMemoryCache(name="graphs")
        builder = SnapGraphBuilder(config, cache)

        first = builder.build(iter(SEGMENTS))

        assert builder.build(SEGMENTS) is first

    def test_null_cache_rebuilds_every_time(self, config):
        builder = SnapGraphBuilder(config, NullCache())

        assert builder.build(SEGMENTS) is not builder.build(SEGMENTS)

    def test_memory_cache_reuses_graph(self, config):
        cache = InMemoryCache(name="graphs", max_size=2)
        builder = SnapGraphBuilder(config, cache)

        first = builder.build(SEGMENTS)
        second = builder.build(list(SEGMENTS))

        assert first is second
        assert cache.stats()["hits"] == 1

    def test_cache_evicts_least_recently_used(self, config):
        cache = InMemoryCache(name="graphs", max_size=2)
        builder = SnapGraphBuilder(config, cache)
        a, b, c = SEGMENTS[:1], SEGMENTS[1:2], SEGMENTS[2:]

        graph_a = builder.build(a)
        builder.build(b)
        builder.build(a)
        builder.build(c)

        assert cache.size() == 2
        assert builder.build(a) is graph_a

    def test_fingerprint_tracks_order_and_parameters(self):
        base = segment_set_fingerprint(SEGMENTS, 15.0, "planar")

        assert base == segment_set_fingerprint(list(SEGMENTS), 15.0, "planar")
        assert base != segment_set_fingerprint(SEGMENTS[::-1], 15.0, "planar")
        assert base != segment_set_fingerprint(SEGMENTS, 10.0, "planar")
        assert base != segment_set_fingerprint(SEGMENTS, 15.0, "haversine")


class TestDijkstraRouteSolver:
    @pytest.fixture
    def graph(self, config):
        return SnapGraphBuilder(config).build(SEGMENTS)

    def test_solve_returns_route(self, config, graph):
        route = DijkstraRouteSolver(config).solve(graph, Point(0, 1), Point(0, 99))

        assert route.origin == Point(0, 1)
        assert route.destination == Point(0, 99)
        assert route.network_distance_m == 95.0

    def test_solve_raises_when_unreachable(self, config, graph):
        with pytest.raises(NoRouteFoundError) as excinfo:
            DijkstraRouteSolver(config).solve(graph, Point(0, 0), Point(500, 600))

        assert excinfo.value.start_node == "node_0"
        assert excinfo.value.end_node == "node_4"

    def test_solve_raises_on_empty_graph(self, config):
        with pytest.raises(EmptyGraphError):
            DijkstraRouteSolver(config).solve(Graph(), Point(0, 0), Point(1, 1))

    def test_solve_safe_returns_empty_routes(self, config, graph, caplog):
        solver = DijkstraRouteSolver(config)

        with caplog.at_level(logging.WARNING):
            assert solver.solve_safe(graph, Point(0, 0), Point(500, 600)).is_empty
            assert solver.solve_safe(Graph(), Point(0, 0), Point(1, 1)).is_empty

        assert "No route found" in caplog.text

    def test_linear_frontier(self, graph):
        config = RoutingConfig(
            snap_tolerance_m=15.0, distance_metric="planar", frontier="linear"
        )

        route = DijkstraRouteSolver(config).solve(graph, Point(0, 1), Point(0, 99))

        assert route.network_distance_m == 95.0
