"""Dependency injection container.

This module provides a small DI container without external frameworks.
Ports are registered with factories and resolved on demand; by default
each resolved instance is a singleton.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(CampusRouteService)

        # Testing
        container = Container()
        container.register(SegmentRepositoryPort, lambda: InMemorySegmentRepository())
        repository = container.resolve(SegmentRepositoryPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    # port -> (factory, shared)
    _bindings: Dict[type[Any], Tuple[Callable[[], Any], bool]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, dropping any instance built
        from a previous binding.

        Args:
            port_type: The port (usually a Protocol) or service class.
            factory: Zero-argument callable building the implementation.
            singleton: Share one instance per container when True.
        """
        with self._lock:
            self._bindings[port_type] = (factory, singleton)
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the implementation bound to ``port_type``.

        Raises:
            KeyError: If nothing is bound to the type.
        """
        with self._lock:
            try:
                factory, shared = self._bindings[port_type]
            except KeyError:
                raise KeyError(f"Type not registered: {port_type}") from None

            if not shared:
                return factory()
            if port_type not in self._instances:
                self._instances[port_type] = factory()
            return self._instances[port_type]

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._bindings

    def clear_all(self) -> None:
        """Forget every binding and every shared instance."""
        with self._lock:
            self._bindings.clear()
            self._instances.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.cache import InMemoryCache, NullCache
        from .adapters.graph import DijkstraRouteSolver, SnapGraphBuilder
        from .adapters.segments import JsonSegmentRepository
        from .ports.cache import CachePort
        from .ports.graph import GraphBuilderPort, RouteSolverPort
        from .ports.segments import SegmentRepositoryPort
        from .services import CampusRouteService

        config = config or get_config()
        container = cls(config=config)

        def create_cache() -> CachePort[Any]:
            if config.cache.enabled:
                return InMemoryCache(name="graphs", max_size=config.cache.max_size)
            return NullCache()

        container.register(CachePort, create_cache)

        container.register(
            SegmentRepositoryPort,
            lambda: JsonSegmentRepository(config.segments),
        )
        container.register(
            GraphBuilderPort,
            lambda: SnapGraphBuilder(
                config.routing, container.resolve(CachePort)
            ),
        )
        container.register(
            RouteSolverPort,
            lambda: DijkstraRouteSolver(config.routing),
        )

        def create_route_service() -> CampusRouteService:
            return CampusRouteService(
                segment_repository=container.resolve(SegmentRepositoryPort),
                graph_builder=container.resolve(GraphBuilderPort),
                route_solver=container.resolve(RouteSolverPort),
            )

        container.register(CampusRouteService, create_route_service)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container, creating it if needed."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
