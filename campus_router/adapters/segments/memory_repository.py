"""In-memory segment repository, for callers that already hold the data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence, Tuple

from ...domain.models import PathSegment


@dataclass
class InMemorySegmentRepository:
    """Implements SegmentRepositoryPort over a fixed tuple of segments."""

    segments: Tuple[PathSegment, ...] = field(default_factory=tuple)

    @classmethod
    def from_raw(cls, raw_segments: Iterable[Sequence[Any]]) -> InMemorySegmentRepository:
        """Build from polylines of ``{lat, lng}`` mappings or ``[lat, lng]`` pairs."""
        return cls(segments=tuple(PathSegment.from_raw(s) for s in raw_segments))

    def load(self) -> Sequence[PathSegment]:
        return self.segments

    def replace(self, segments: Iterable[PathSegment]) -> None:
        """Swap in a new segment set (e.g. after the admin tool saves)."""
        self.segments = tuple(segments)
