import json
import logging

import pytest
from pydantic import ValidationError

from campus_router.adapters.cache import InMemoryCache, NullCache
from campus_router.adapters.segments import JsonSegmentRepository
from campus_router.config import (
    AppConfig,
    CacheConfig,
    ObservabilityConfig,
    RoutingConfig,
    SegmentsConfig,
    get_config,
    reset_config,
)
from campus_router.container import Container, get_container, reset_container
from campus_router.domain.models import Point
from campus_router.logging_setup import JsonFormatter, configure_logging
from campus_router.ports.cache import CachePort
from campus_router.ports.graph import GraphBuilderPort
from campus_router.ports.segments import SegmentRepositoryPort
from campus_router.services import CampusRouteService


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


def test_default_config():
    config = get_config()

    assert config.routing.snap_tolerance_m == 15.0
    assert config.routing.distance_metric == "haversine"
    assert config.routing.frontier == "heap"
    assert config.segments.segments_path.name == "paths.json"
    assert config.cache.enabled


def test_config_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("CAMPUS_ROUTING_SNAP_TOLERANCE_M", "7.5")
    monkeypatch.setenv("CAMPUS_ROUTING_FRONTIER", "linear")
    monkeypatch.setenv("CAMPUS_SEGMENTS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CAMPUS_CACHE_ENABLED", "false")

    config = get_config()

    assert config.routing.snap_tolerance_m == 7.5
    assert config.routing.frontier == "linear"
    assert config.segments.segments_path == tmp_path / "paths.json"
    assert not config.cache.enabled


def test_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    monkeypatch.setenv("CAMPUS_ROUTING_SNAP_TOLERANCE_M", "3")

    assert get_config() is first

    reset_config()
    assert get_config().routing.snap_tolerance_m == 3.0


def test_config_rejects_bad_values():
    with pytest.raises(ValidationError):
        RoutingConfig(distance_metric="manhattan")
    with pytest.raises(ValidationError):
        RoutingConfig(snap_tolerance_m=0)


@pytest.fixture
def app_config(tmp_path):
    (tmp_path / "paths.json").write_text(
        json.dumps([[[0, 0], [0, 40]], [[0, 40], [30, 40]]]), encoding="utf-8"
    )
    return AppConfig(
        routing=RoutingConfig(distance_metric="planar", snap_tolerance_m=5.0),
        segments=SegmentsConfig(data_dir=tmp_path),
        cache=CacheConfig(max_size=3),
    )


def test_default_container_wires_route_service(app_config):
    container = Container.create_default(app_config)

    service = container.resolve(CampusRouteService)
    route = service.find_route(Point(0, 0), Point(30, 40))

    assert isinstance(service.segment_repository, JsonSegmentRepository)
    assert route.points[1:-1] == (Point(0, 0), Point(0, 40), Point(30, 40))
    assert container.resolve(CampusRouteService) is service


def test_default_container_cache_selection(app_config):
    cache = Container.create_default(app_config).resolve(CachePort)
    assert isinstance(cache, InMemoryCache)
    assert cache.max_size == 3

    app_config.cache.enabled = False
    cache = Container.create_default(app_config).resolve(CachePort)
    assert isinstance(cache, NullCache)


def test_graph_builder_shares_container_cache(app_config):
    container = Container.create_default(app_config)

    builder = container.resolve(GraphBuilderPort)

    assert builder.cache is container.resolve(CachePort)


def test_register_overrides_and_transient_factories():
    container = Container(config=AppConfig())
    container.register(SegmentRepositoryPort, lambda: object(), singleton=False)

    assert container.is_registered(SegmentRepositoryPort)
    assert container.resolve(SegmentRepositoryPort) is not container.resolve(
        SegmentRepositoryPort
    )

    with pytest.raises(KeyError):
        container.resolve(GraphBuilderPort)


def test_register_replaces_shared_instance():
    container = Container(config=AppConfig())
    container.register(SegmentRepositoryPort, lambda: "first")

    assert container.resolve(SegmentRepositoryPort) == "first"

    container.register(SegmentRepositoryPort, lambda: "second")
    assert container.resolve(SegmentRepositoryPort) == "second"


def test_get_container_is_a_singleton_until_reset():
    first = get_container()

    assert get_container() is first

    reset_container()
    assert get_container() is not first
    assert not first.is_registered(CampusRouteService)
    with pytest.raises(KeyError):
        first.resolve(CampusRouteService)


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        "campus_router.test", logging.INFO, __file__, 1, "Route found", None, None
    )
    record.start_node = "node_0"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Route found"
    assert payload["level"] == "INFO"
    assert payload["start_node"] == "node_0"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_structured(restore_root_logger):
    configure_logging(ObservabilityConfig(level="debug", structured=True))

    assert restore_root_logger.level == logging.DEBUG
    assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)


def test_configure_logging_plain(restore_root_logger):
    configure_logging(ObservabilityConfig(format="%(levelname)s %(message)s"))

    formatter = restore_root_logger.handlers[0].formatter
    assert not isinstance(formatter, JsonFormatter)
    assert formatter._fmt == "%(levelname)s %(message)s"
