"""Chunked execution and pagination.

Architecture:
    - merge.py: Result merging (sequence append / per-key merge / overwrite)
    - definitions.py: Chunk plans, accumulator state, result envelope
    - planners.py: Splitting a collection into ordered chunks
    - executors.py: Sequential per-chunk execution with result folding
    - pagination.py: Skip/limit page fetching until a short page
    - telemetry.py: Structured logging

Usage:
    >>> rows = await process_in_chunks(ids, fetch_by_ids, settings=BatchSettings(chunk_size=50))
    >>> rows = await download_in_chunks({"where": {"active": True}}, find_rows)
"""

from __future__ import annotations

from .definitions import Accumulator, ChunkPlan, ChunkResult, build_cursor
from .executors import ChunkedExecutor, process_in_chunks
from .merge import ResultShape, classify_result, concat_results
from .pagination import PaginatedAccumulator, download_in_chunks
from .planners import ChunkPlanner

__all__ = [
    "Accumulator",
    "ChunkPlan",
    "ChunkResult",
    "ChunkPlanner",
    "ChunkedExecutor",
    "PaginatedAccumulator",
    "ResultShape",
    "build_cursor",
    "classify_result",
    "concat_results",
    "download_in_chunks",
    "process_in_chunks",
]
