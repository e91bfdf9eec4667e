"""Chunking data structures.

This module defines the transient, call-scoped structures used by the
executor and the paginated accumulator: chunk plans, the accumulator
state, and the result envelope.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .merge import ResultShape, classify_result, concat_results

# Operations and fetchers may be sync callables or coroutine functions
ChunkOperation = Callable[[list[Any]], Any]
PageFetcher = Callable[[dict[str, Any]], Any]


@dataclass(frozen=True)
class ChunkPlan:
    """Plan for a single chunk of the source collection.

    Attributes:
        chunk_index: Zero-based index of this chunk in the overall plan
        start: Offset of the first item in the source collection
        items: The items handed to the operation (an independent list)
    """

    chunk_index: int
    start: int
    items: list[Any]

    @property
    def size(self) -> int:
        return len(self.items)

    @property
    def end(self) -> int:
        return self.start + len(self.items)


@dataclass
class ChunkResult:
    """Result of a chunked or paginated run.

    Attributes:
        data: Merged result of every chunk / page
        chunks_used: Number of operation or fetch calls made
        chunk_size: Chunk (or page) size the run used
        bypassed: True when the input fit in one chunk and no folding ran
    """

    data: Any
    chunks_used: int
    chunk_size: int
    bypassed: bool = False


class Accumulator:
    """Running merged result with an explicit empty state.

    The accumulator starts empty. The first value handed to ``fold`` while
    it is empty seeds it as-is; later values are merged with
    ``concat_results`` unless they are empty (None, or a sequence or
    mapping with no items), which leaves it unchanged.
    A ``None`` seed keeps the accumulator empty.
    """

    def __init__(self, initial: Any = None) -> None:
        self._value = initial

    @property
    def empty(self) -> bool:
        return self._value is None

    @property
    def value(self) -> Any:
        return self._value

    def fold(self, result: Any) -> Any:
        if self.empty:
            self._value = result
        elif not is_empty_result(result):
            self._value = concat_results(self._value, result)
        return self._value


def build_cursor(filter: Mapping[str, Any] | None, page_size: int) -> dict[str, Any]:
    """Create the working pagination cursor from a caller filter.

    The caller's filter is deep-copied so the loop can advance ``skip``
    without touching the original. Any ``skip``/``limit`` it carries are
    overwritten.
    """
    cursor: dict[str, Any] = copy.deepcopy(dict(filter)) if filter else {}
    cursor["skip"] = 0
    cursor["limit"] = page_size
    return cursor


def is_empty_result(result: Any) -> bool:
    """Whether a chunk result carries nothing to merge.

    Only ``None`` and empty sequences or mappings are empty; scalars and
    other objects are never truth-tested.
    """
    if result is None:
        return True
    if classify_result(result) is ResultShape.SCALAR or not hasattr(result, "__len__"):
        return False
    return len(result) == 0
