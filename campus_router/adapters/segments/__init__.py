"""Segment adapters - Implementations of the SegmentRepositoryPort.

Available implementations:
- JsonSegmentRepository: Loads segments exported by the admin drawing tool
- InMemorySegmentRepository: Serves segments supplied by the caller
"""

from .json_repository import JsonSegmentRepository, parse_segments
from .memory_repository import InMemorySegmentRepository

__all__ = ["JsonSegmentRepository", "InMemorySegmentRepository", "parse_segments"]
