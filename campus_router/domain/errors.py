"""Typed domain errors for the campus route finder.

Expected routing outcomes (no nodes, unreachable destination) are
ordinary return values on the main service path. These errors are
raised by the strict APIs and by infrastructure failures such as an
unreadable segment file.

All errors inherit from CampusRouterError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CampusRouterError(Exception):
    """Base error for the campus route finder.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class SegmentDataError(CampusRouterError):
    """Path segment data could not be read or parsed.

    Attributes:
        file_path: Path to the segment file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class EmptyGraphError(CampusRouterError):
    """The graph has no nodes, so no coordinate can be snapped to it."""


@dataclass
class NoRouteFoundError(CampusRouterError):
    """No path connects the snapped start and destination nodes.

    Attributes:
        start_node: Id of the node nearest the origin
        end_node: Id of the node nearest the destination
    """

    start_node: str = ""
    end_node: str = ""


@dataclass
class ConfigurationError(CampusRouterError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
