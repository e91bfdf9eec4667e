"""Chunk execution logic for applying an operation to a large collection.

This module provides the ChunkedExecutor class that splits a collection
into chunks, invokes the operation on each chunk strictly in order, and
folds the per-chunk results into one.
"""

from __future__ import annotations

import inspect
from collections.abc import Sequence
from time import perf_counter
from typing import Any

from ..core.settings import resolve_chunk_size
from .definitions import Accumulator, ChunkOperation, ChunkResult
from .planners import ChunkPlanner
from .telemetry import (
    log_chunk_completed,
    log_chunk_error,
    log_chunk_execution_complete,
    log_chunk_plan,
)


async def call_maybe_async(func: Any, *args: Any) -> Any:
    """Call a sync or async callable and return its (awaited) result."""
    result = func(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


def callable_name(func: Any) -> str:
    return getattr(func, "__qualname__", None) or type(func).__name__


class ChunkedExecutor:
    """Applies an operation to a collection one bounded chunk at a time.

    The operation never sees more than ``chunk_size`` items. Chunks run
    sequentially in source order; the first exception aborts the run and
    propagates unchanged, discarding any partial result.
    """

    def __init__(self, settings: Any = None) -> None:
        """Initialize chunked executor.

        Args:
            settings: BatchSettings, mapping, or object with a ``settings``
                attribute; chunk size defaults to 100
        """
        self._settings = settings

    async def execute(self, collection: Sequence[Any], operation: ChunkOperation) -> ChunkResult:
        """Run the operation over the collection.

        Args:
            collection: Ordered source collection (never mutated)
            operation: Sync or async callable taking a list of items

        Returns:
            ChunkResult with the merged data and run metadata
        """
        chunk_size = resolve_chunk_size(self._settings)
        planner = ChunkPlanner(chunk_size)
        name = callable_name(operation)
        run_start = perf_counter()

        # Fast path: the whole collection is handed over in a single call
        if not planner.needs_chunking(collection):
            data = await self._run_chunk(operation, name, 0, collection)
            result = ChunkResult(data=data, chunks_used=1, chunk_size=chunk_size, bypassed=True)
            log_chunk_execution_complete(
                operation=name,
                result=result,
                total_latency_ms=(perf_counter() - run_start) * 1000.0,
            )
            return result

        plans = planner.plan(collection)
        log_chunk_plan(
            operation=name,
            total_items=len(collection),
            total_chunks=len(plans),
            chunk_size=chunk_size,
        )

        accumulator = Accumulator()
        for plan in plans:
            chunk_data = await self._run_chunk(operation, name, plan.chunk_index, plan.items)
            accumulator.fold(chunk_data)

        result = ChunkResult(data=accumulator.value, chunks_used=len(plans), chunk_size=chunk_size)
        log_chunk_execution_complete(
            operation=name,
            result=result,
            total_latency_ms=(perf_counter() - run_start) * 1000.0,
        )
        return result

    async def _run_chunk(
        self, operation: ChunkOperation, name: str, chunk_index: int, items: Any
    ) -> Any:
        chunk_start = perf_counter()
        try:
            data = await call_maybe_async(operation, items)
        except Exception as e:
            log_chunk_error(
                operation=name,
                chunk_index=chunk_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        log_chunk_completed(
            operation=name,
            chunk_index=chunk_index,
            items=len(items),
            latency_ms=(perf_counter() - chunk_start) * 1000.0,
        )
        return data


async def process_in_chunks(
    collection: Sequence[Any], operation: ChunkOperation, *, settings: Any = None
) -> Any:
    """Apply ``operation`` to ``collection`` in chunks and merge the results.

    Collections no larger than the chunk size are passed to the operation
    unchanged in a single call and its result is returned as-is.

    Raises:
        Exception: Whatever the operation raised, unchanged
    """
    result = await ChunkedExecutor(settings).execute(collection, operation)
    return result.data
