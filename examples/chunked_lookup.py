#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from laakhay.batch import BatchSettings, download_in_chunks, process_in_chunks

TABLE = [{"id": i, "name": f"item-{i}", "active": i % 3 != 0} for i in range(1, 251)]


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Look up and page through an in-memory table in chunks")
    p.add_argument("count", nargs="?", type=int, default=120)
    p.add_argument("chunk_size", nargs="?", type=int, default=25)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def find_by_ids(ids: list[int]) -> dict[str, list]:
    await asyncio.sleep(0)
    wanted = set(ids)
    return {"rows": [row for row in TABLE if row["id"] in wanted], "missing": []}


async def find_active(cursor: dict) -> list[dict]:
    await asyncio.sleep(0)
    active = [row for row in TABLE if row["active"] == cursor["where"]["active"]]
    return active[cursor["skip"] : cursor["skip"] + cursor["limit"]]


async def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.INFO)
    settings = BatchSettings(chunk_size=args.chunk_size)

    found = await process_in_chunks(list(range(1, args.count + 1)), find_by_ids, settings=settings)
    active = await download_in_chunks({"where": {"active": True}}, find_active, settings=settings)

    print("=" * 40)
    print(f"Chunk size   : {settings.effective_chunk_size}")
    print(f"Rows found   : {len(found['rows'])}")
    print(f"Active rows  : {len(active)}")
    print("=" * 40)


if __name__ == "__main__":
    asyncio.run(main())
