"""Structured logging for chunking operations.

This module provides telemetry hooks for the chunked executor and the
paginated accumulator, emitting structured log records.
"""

from __future__ import annotations

import logging

from .definitions import ChunkResult

logger = logging.getLogger(__name__)


def log_chunk_plan(
    *,
    operation: str,
    total_items: int,
    total_chunks: int,
    chunk_size: int,
) -> None:
    """Log chunk plan creation.

    Args:
        operation: Name of the per-chunk operation
        total_items: Number of items in the source collection
        total_chunks: Number of chunks planned
        chunk_size: Maximum items per chunk
    """
    logger.info(
        "chunk_plan_created",
        extra={
            "operation": operation,
            "total_items": total_items,
            "total_chunks": total_chunks,
            "chunk_size": chunk_size,
        },
    )


def log_chunk_completed(
    *,
    operation: str,
    chunk_index: int,
    items: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single chunk.

    Args:
        operation: Name of the per-chunk operation
        chunk_index: Zero-based index of the chunk
        items: Number of items handed to the operation
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "chunk_completed",
        extra={
            "operation": operation,
            "chunk_index": chunk_index,
            "items": items,
            "latency_ms": latency_ms,
        },
    )


def log_chunk_error(
    *,
    operation: str,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log chunk execution error.

    Args:
        operation: Name of the per-chunk operation
        chunk_index: Zero-based index of the chunk that failed
        error_type: Exception class name
        error_message: Error message
    """
    logger.error(
        "chunk_error",
        extra={
            "operation": operation,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_chunk_execution_complete(
    *,
    operation: str,
    result: ChunkResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of chunk execution."""
    logger.info(
        "chunk_execution_complete",
        extra={
            "operation": operation,
            "chunks_used": result.chunks_used,
            "chunk_size": result.chunk_size,
            "bypassed": result.bypassed,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_page_fetched(
    *,
    fetcher: str,
    page_index: int,
    skip: int,
    rows: int,
    latency_ms: float | None = None,
) -> None:
    """Log a fetched page.

    Args:
        fetcher: Name of the page fetch function
        page_index: Zero-based index of the page
        skip: Cursor offset the page was requested with
        rows: Number of rows in the page
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "fetcher": fetcher,
            "page_index": page_index,
            "skip": skip,
            "rows": rows,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    fetcher: str,
    page_index: int,
    skip: int,
    error_type: str,
    error_message: str,
) -> None:
    logger.error(
        "page_error",
        extra={
            "fetcher": fetcher,
            "page_index": page_index,
            "skip": skip,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_complete(
    *,
    fetcher: str,
    result: ChunkResult,
    total_latency_ms: float | None = None,
) -> None:
    logger.info(
        "pagination_complete",
        extra={
            "fetcher": fetcher,
            "pages_fetched": result.chunks_used,
            "page_size": result.chunk_size,
            "total_latency_ms": total_latency_ms,
        },
    )
