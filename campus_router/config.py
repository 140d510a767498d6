"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for routing parameters,
segment data locations, graph caching and logging. The snap tolerance
lives here as an explicit value handed to the graph builder rather than
as a module-level constant.

Configuration can be overridden via environment variables:
- CAMPUS_ROUTING_SNAP_TOLERANCE_M=10
- CAMPUS_ROUTING_DISTANCE_METRIC=geodesic
- CAMPUS_SEGMENTS_DATA_DIR=/path/to/data
- CAMPUS_CACHE_ENABLED=false
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DistanceMetric = Literal["haversine", "geodesic", "planar"]
FrontierStrategy = Literal["heap", "linear"]


class RoutingConfig(BaseSettings):
    """Graph construction and search configuration.

    Environment variables prefixed with CAMPUS_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_ROUTING_")

    snap_tolerance_m: float = Field(default=15.0, gt=0)
    distance_metric: DistanceMetric = "haversine"
    frontier: FrontierStrategy = "heap"


class SegmentsConfig(BaseSettings):
    """Path segment data configuration.

    Environment variables prefixed with CAMPUS_SEGMENTS_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_SEGMENTS_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    segments_file: str = "paths.json"

    @property
    def segments_path(self) -> Path:
        """Full path to the segments JSON file."""
        return self.data_dir / self.segments_file


class CacheConfig(BaseSettings):
    """Graph cache configuration.

    Environment variables prefixed with CAMPUS_CACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_CACHE_")

    enabled: bool = True
    max_size: int = Field(default=8, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CAMPUS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.routing.snap_tolerance_m)
        print(config.segments.segments_path)

    Environment variables prefixed with CAMPUS_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_")

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    segments: SegmentsConfig = Field(default_factory=SegmentsConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
