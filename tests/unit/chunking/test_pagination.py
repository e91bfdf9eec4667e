"""Unit tests for paginated accumulation."""

from __future__ import annotations

import copy
import logging
from typing import Any

import pytest

from laakhay.batch import BatchSettings, PaginatedAccumulator, download_in_chunks


class FakeSource:
    """Async page fetcher over an in-memory table."""

    def __init__(self, rows: list[Any], fail_on_call: int | None = None) -> None:
        self.rows = rows
        self.fail_on_call = fail_on_call
        self.cursors: list[dict[str, Any]] = []

    async def __call__(self, cursor: dict[str, Any]) -> list[Any]:
        self.cursors.append(cursor)
        if self.fail_on_call is not None and len(self.cursors) == self.fail_on_call:
            raise ConnectionError("page fetch failed")
        return self.rows[cursor["skip"] : cursor["skip"] + cursor["limit"]]


class TestPaginatedAccumulator:
    """Test PaginatedAccumulator functionality."""

    @pytest.mark.asyncio
    async def test_fetches_until_short_page(self):
        source = FakeSource(list(range(25)))

        result = await download_in_chunks(None, source, settings=BatchSettings(chunk_size=10))

        assert result == list(range(25))
        assert [c["skip"] for c in source.cursors] == [0, 10, 20]
        assert all(c["limit"] == 10 for c in source.cursors)

    @pytest.mark.asyncio
    async def test_skip_advances_by_page_size(self):
        """The k-th fetch uses skip == (k - 1) * page_size."""
        source = FakeSource(list(range(34)))

        await download_in_chunks({}, source, settings={"chunk_size": 8})

        assert [c["skip"] for c in source.cursors] == [(k - 1) * 8 for k in range(1, 6)]

    @pytest.mark.asyncio
    async def test_exact_multiple_issues_extra_fetch(self):
        """A full last page is followed by one more (empty) fetch."""
        source = FakeSource(list(range(20)))

        result = await PaginatedAccumulator({"chunk_size": 10}).execute(None, source)

        assert result.data == list(range(20))
        assert result.chunks_used == 3
        assert source.cursors[-1]["skip"] == 20

    @pytest.mark.asyncio
    async def test_default_page_size(self):
        source = FakeSource(list(range(150)))

        await download_in_chunks(None, source)

        assert [c["limit"] for c in source.cursors] == [100, 100]

    @pytest.mark.asyncio
    async def test_negative_string_page_size_uses_default(self):
        source = FakeSource(list(range(150)))

        await download_in_chunks(None, source, settings={"chunk_size": "-5"})

        assert [c["limit"] for c in source.cursors] == [100, 100]

    @pytest.mark.asyncio
    async def test_filter_not_mutated(self):
        original = {"where": {"active": True}, "skip": 99, "limit": 1}
        snapshot = copy.deepcopy(original)
        source = FakeSource(list(range(5)))

        await download_in_chunks(original, source, settings={"chunk_size": 2})

        assert original == snapshot
        assert source.cursors[0] == {"where": {"active": True}, "skip": 0, "limit": 2}
        assert source.cursors[0]["where"] is not original["where"]

    @pytest.mark.asyncio
    async def test_error_on_third_page_stops_fetching(self):
        source = FakeSource(list(range(100)), fail_on_call=3)

        with pytest.raises(ConnectionError, match="page fetch failed"):
            await download_in_chunks(None, source, settings={"chunk_size": 10})

        assert len(source.cursors) == 3

    @pytest.mark.asyncio
    async def test_fetcher_cannot_move_cursor(self):
        seen: list[int] = []

        async def fetch(cursor):
            seen.append(cursor["skip"])
            cursor["skip"] = 1000
            return [0] * 2 if len(seen) < 3 else []

        await download_in_chunks(None, fetch, settings={"chunk_size": 2})

        assert seen == [0, 2, 4]

    @pytest.mark.asyncio
    async def test_none_page_ends_pagination(self):
        pages = iter([[1, 2], None])

        result = await download_in_chunks(None, lambda cursor: next(pages), settings={"chunk_size": 2})

        assert result == [1, 2]

    @pytest.mark.asyncio
    async def test_max_pages_caps_fetches(self):
        source = FakeSource(list(range(100)))

        result = await download_in_chunks(
            None, source, settings=BatchSettings(chunk_size=10, max_pages=2)
        )

        assert result == list(range(20))
        assert len(source.cursors) == 2

    @pytest.mark.asyncio
    async def test_empty_source(self):
        source = FakeSource([])

        assert await download_in_chunks(None, source) == []
        assert len(source.cursors) == 1

    @pytest.mark.asyncio
    async def test_logs_page_telemetry(self, caplog):
        caplog.set_level(logging.INFO, logger="laakhay.batch.chunking.telemetry")

        await download_in_chunks(None, FakeSource(list(range(5))), settings={"chunk_size": 3})

        fetched = [r for r in caplog.records if r.getMessage() == "page_fetched"]
        assert [r.skip for r in fetched] == [0, 3]
        assert [r.rows for r in fetched] == [3, 2]
        assert any(r.getMessage() == "pagination_complete" for r in caplog.records)
