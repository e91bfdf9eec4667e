"""Laakhay Batch - chunked execution and pagination with result merging."""

from .chunking import (
    Accumulator,
    ChunkedExecutor,
    ChunkPlan,
    ChunkPlanner,
    ChunkResult,
    PaginatedAccumulator,
    ResultShape,
    classify_result,
    concat_results,
    download_in_chunks,
    process_in_chunks,
)
from .core import (
    DEFAULT_CHUNK_SIZE,
    BatchError,
    BatchSettings,
    SettingsError,
    coerce_settings,
    resolve_chunk_size,
)

__version__ = "0.1.0"

__all__ = [
    # Operations
    "process_in_chunks",
    "download_in_chunks",
    "concat_results",
    # Executors
    "ChunkedExecutor",
    "PaginatedAccumulator",
    "ChunkPlanner",
    "ChunkPlan",
    "ChunkResult",
    "Accumulator",
    "ResultShape",
    "classify_result",
    # Settings
    "DEFAULT_CHUNK_SIZE",
    "BatchSettings",
    "coerce_settings",
    "resolve_chunk_size",
    # Exceptions
    "BatchError",
    "SettingsError",
]
