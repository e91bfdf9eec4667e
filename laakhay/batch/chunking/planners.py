"""Chunk planning logic for splitting a collection.

This module provides the ChunkPlanner class that determines how to split
a source collection into ordered, contiguous, non-overlapping chunks.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .definitions import ChunkPlan


class ChunkPlanner:
    """Plans fixed-size chunks over a source collection.

    The source is copied once, so the plans stay valid even if the caller
    mutates its collection afterwards.
    """

    def __init__(self, chunk_size: int) -> None:
        """Initialize chunk planner.

        Args:
            chunk_size: Maximum number of items per chunk

        Raises:
            ValueError: If chunk_size is not positive
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def needs_chunking(self, collection: Sequence[Any]) -> bool:
        """Whether the collection is larger than a single chunk."""
        return len(collection) > self._chunk_size

    def plan(self, collection: Sequence[Any]) -> list[ChunkPlan]:
        """Plan chunks for a collection.

        Args:
            collection: Ordered source collection

        Returns:
            Chunk plans in source order; the last chunk may be shorter
        """
        items = list(collection)
        size = self._chunk_size
        return [
            ChunkPlan(chunk_index=index, start=start, items=items[start : start + size])
            for index, start in enumerate(range(0, len(items), size))
        ]
