"""Unit tests for chunk planning logic."""

from __future__ import annotations

import pytest

from laakhay.batch.chunking import ChunkPlanner


class TestChunkPlanner:
    """Test ChunkPlanner functionality."""

    def test_plan_splits_in_order(self):
        """Chunks are contiguous, disjoint and concatenate back to the source."""
        planner = ChunkPlanner(chunk_size=3)
        source = list(range(10))

        plans = planner.plan(source)

        assert [p.items for p in plans] == [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9]]
        assert [p.chunk_index for p in plans] == [0, 1, 2, 3]
        assert [(p.start, p.end) for p in plans] == [(0, 3), (3, 6), (6, 9), (9, 10)]
        assert [item for p in plans for item in p.items] == source

    def test_plan_exact_multiple(self):
        plans = ChunkPlanner(chunk_size=5).plan(list(range(10)))
        assert [p.size for p in plans] == [5, 5]

    def test_plan_is_independent_of_source(self):
        """Mutating the source after planning does not affect the plans."""
        source = [1, 2, 3, 4]
        plans = ChunkPlanner(chunk_size=2).plan(source)

        source.clear()

        assert [p.items for p in plans] == [[1, 2], [3, 4]]

    def test_needs_chunking_boundary(self):
        planner = ChunkPlanner(chunk_size=3)
        assert not planner.needs_chunking([])
        assert not planner.needs_chunking([1, 2, 3])
        assert planner.needs_chunking([1, 2, 3, 4])

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError, match="chunk_size must be >= 1"):
            ChunkPlanner(chunk_size=0)
