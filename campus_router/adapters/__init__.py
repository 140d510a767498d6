"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Segment storage (JSON files, in-memory)
- Graph construction and route solving
- Caching systems (in-memory, null)
"""
