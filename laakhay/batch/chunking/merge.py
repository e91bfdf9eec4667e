"""Result merging for chunked and paginated runs.

Two partial results are assumed to be homogeneous: the same shape at every
corresponding position. Shapes are classified into a small closed set and
merged by shape:

    SEQUENCE  append current to previous
    MAPPING   merge key by key, recursing into this algorithm
    SCALAR    current overwrites previous

Heterogeneous inputs (e.g. a list merged with a dict) are not validated and
produce an unspecified result.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel


class ResultShape(str, Enum):
    """Shape of a partial result, used to pick the merge rule."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SCALAR = "scalar"


def classify_result(value: Any) -> ResultShape:
    """Classify a value into one of the mergeable shapes.

    Any Sequence (list, tuple, deque, range, ...) other than strings and
    bytes is a sequence. Pydantic models merge like mappings, field by field.
    """
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return ResultShape.SEQUENCE
    if isinstance(value, (Mapping, BaseModel)):
        return ResultShape.MAPPING
    return ResultShape.SCALAR


def concat_results(previous: Any, current: Any) -> Any:
    """Merge the newly produced result into the accumulated one.

    Neither input is mutated; containers in the result are new objects.

    Args:
        previous: Accumulated result (None when nothing has been accumulated)
        current: Result of the latest chunk or page

    Returns:
        Merged result

    Examples:
        >>> concat_results([1, 2], [3, 4])
        [1, 2, 3, 4]
        >>> concat_results({"a": [1]}, {"a": [2], "b": [3]})
        {'a': [1, 2], 'b': [3]}
        >>> concat_results(5, 7)
        7
    """
    shape = classify_result(current)
    if shape is ResultShape.SEQUENCE:
        return _concat_sequence(previous, current)
    if shape is ResultShape.MAPPING:
        if isinstance(current, BaseModel):
            return _merge_model(previous, current)
        return _merge_mapping(previous, current)
    return current


def _concat_sequence(previous: Any, current: Sequence[Any]) -> Any:
    if previous is None:
        return list(current)
    if isinstance(previous, tuple):
        return previous + tuple(current)
    return [*previous, *current]


def _merge_mapping(previous: Any, current: Mapping[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(previous) if previous is not None else {}
    for key, value in current.items():
        merged[key] = concat_results(merged.get(key), value)
    return merged


def _merge_model(previous: Any, current: BaseModel) -> BaseModel:
    if previous is None:
        return current
    update = {
        name: concat_results(getattr(previous, name, None), getattr(current, name))
        for name in type(current).model_fields
    }
    return previous.model_copy(update=update)
