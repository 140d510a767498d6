"""JSON segment repository adapter.

Reads the path segments exported by the admin drawing tool. Two
layouts are accepted:

    [[{"lat": 15.39, "lng": 73.87}, ...], ...]
    {"segments": [[[15.39, 73.87], ...], ...]}

Points may be ``{lat, lng}`` objects or ``[lat, lng]`` pairs.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, model_validator

from ...config import SegmentsConfig, get_config
from ...domain.errors import SegmentDataError
from ...domain.models import PathSegment, Point


class PointPayload(BaseModel):
    """One drawn vertex."""

    model_config = ConfigDict(extra="ignore")

    lat: float
    lng: float

    @model_validator(mode="before")
    @classmethod
    def accept_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"Expected a [lat, lng] pair, got {len(data)} values")
            return {"lat": data[0], "lng": data[1]}
        return data


class SegmentFilePayload(BaseModel):
    """Whole segment file."""

    segments: List[List[PointPayload]]

    @model_validator(mode="before")
    @classmethod
    def accept_bare_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"segments": data}
        return data

    def to_segments(self) -> List[PathSegment]:
        return [
            PathSegment(points=tuple(Point(lat=p.lat, lng=p.lng) for p in raw))
            for raw in self.segments
        ]


def parse_segments(data: Any) -> List[PathSegment]:
    """Validate already-decoded JSON and convert it to path segments.

    Raises:
        SegmentDataError: If the payload does not describe segments.
    """
    try:
        return SegmentFilePayload.model_validate(data).to_segments()
    except ValueError as e:
        # pydantic's ValidationError is a ValueError, as is Point's check.
        raise SegmentDataError(f"Invalid segment data: {e}", cause=e) from e


@dataclass
class JsonSegmentRepository:
    """Segment repository that loads from a JSON file.

    This adapter implements SegmentRepositoryPort. The parsed segments
    are cached until clear_cache() is called.

    Attributes:
        config: Segment data configuration (directory, file name)
    """

    config: SegmentsConfig = field(default_factory=lambda: get_config().segments)
    _logger: logging.Logger = field(init=False, repr=False)

    _segments: Optional[List[PathSegment]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Sequence[PathSegment]:
        """Load path segments from the configured JSON file.

        Returns:
            Segments in file order.

        Raises:
            SegmentDataError: If the file cannot be read or parsed.
        """
        if self._segments is not None:
            return self._segments

        path = self.config.segments_path
        self._logger.debug("Loading segments", extra={"segments_path": str(path)})

        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SegmentDataError(
                f"Failed to read segments: {e}",
                file_path=str(path),
                cause=e,
            ) from e

        try:
            segments = parse_segments(data)
        except SegmentDataError as e:
            e.file_path = str(path)
            raise

        self._segments = segments
        self._logger.info(
            "Segments loaded",
            extra={
                "segments": len(segments),
                "points": sum(len(s) for s in segments),
            },
        )
        return segments

    def clear_cache(self) -> None:
        """Forget loaded segments so the next load() re-reads the file."""
        self._segments = None
        self._logger.debug("Segment cache cleared")
