"""Skip/limit pagination driven to exhaustion.

This module provides the PaginatedAccumulator class that repeatedly calls a
page fetcher with an advancing cursor and merges every page into one result.
"""

from __future__ import annotations

from collections.abc import Mapping
from time import perf_counter
from typing import Any

from ..core.settings import coerce_settings
from .definitions import ChunkResult, PageFetcher, build_cursor
from .executors import call_maybe_async, callable_name
from .merge import concat_results
from .telemetry import log_page_error, log_page_fetched, log_pagination_complete


class PaginatedAccumulator:
    """Fetches pages until a short page signals the end of the data.

    A page holding exactly ``page_size`` rows means more may follow, so a
    source whose last page is exactly full gets one extra (empty) fetch.
    """

    def __init__(self, settings: Any = None) -> None:
        """Initialize paginated accumulator.

        Args:
            settings: BatchSettings, mapping, or object with a ``settings``
                attribute; page size defaults to 100
        """
        self._settings = settings

    async def execute(
        self, filter: Mapping[str, Any] | None, fetch_page: PageFetcher
    ) -> ChunkResult:
        """Fetch and merge every page.

        Args:
            filter: Caller's request filter (never mutated)
            fetch_page: Sync or async callable taking the cursor dict and
                returning a sequence of rows

        Returns:
            ChunkResult with the merged rows and run metadata
        """
        settings = coerce_settings(self._settings)
        page_size = settings.effective_chunk_size
        max_pages = settings.max_pages
        name = callable_name(fetch_page)
        run_start = perf_counter()

        cursor = build_cursor(filter, page_size)
        results: Any = []
        pages = 0

        while True:
            page = await self._fetch(fetch_page, name, pages, cursor)
            pages += 1
            if page is None:
                break
            results = concat_results(results, page)
            if len(page) != page_size:
                break
            if max_pages is not None and pages >= max_pages:
                break
            cursor["skip"] += page_size

        result = ChunkResult(data=results, chunks_used=pages, chunk_size=page_size)
        log_pagination_complete(
            fetcher=name,
            result=result,
            total_latency_ms=(perf_counter() - run_start) * 1000.0,
        )
        return result

    async def _fetch(
        self, fetch_page: PageFetcher, name: str, page_index: int, cursor: dict[str, Any]
    ) -> Any:
        skip = cursor["skip"]
        page_start = perf_counter()
        try:
            # Each fetch gets its own snapshot so it cannot move the cursor
            page = await call_maybe_async(fetch_page, dict(cursor))
        except Exception as e:
            log_page_error(
                fetcher=name,
                page_index=page_index,
                skip=skip,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        log_page_fetched(
            fetcher=name,
            page_index=page_index,
            skip=skip,
            rows=len(page) if page is not None else 0,
            latency_ms=(perf_counter() - page_start) * 1000.0,
        )
        return page


async def download_in_chunks(
    filter: Mapping[str, Any] | None, fetch_page: PageFetcher, *, settings: Any = None
) -> Any:
    """Page through ``fetch_page`` with skip/limit and return all rows merged.

    Raises:
        Exception: Whatever the fetcher raised, unchanged
    """
    result = await PaginatedAccumulator(settings).execute(filter, fetch_page)
    return result.data
