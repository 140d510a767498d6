"""Segment port - Abstraction over where path segments come from.

Segments are authored by the admin drawing tool and stored elsewhere;
the route service only needs to read the current set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import PathSegment


class SegmentRepositoryPort(Protocol):
    """Port for loading path segments.

    Implementations:
    - adapters/segments/json_repository.py (JsonSegmentRepository)
    - adapters/segments/memory_repository.py (InMemorySegmentRepository)
    """

    def load(self) -> Sequence[PathSegment]:
        """Load the current segment set.

        Returns:
            Segments in authoring order. Order matters for node snapping.
        """
        ...
