"""Sorting: counting sort, inversion counting, quicksort and shuffling."""

from __future__ import annotations

import random
from collections.abc import Iterable, MutableSequence, Sequence


def count_sort(values: Iterable[int], low: int, high: int) -> list[int]:
    """Sorted copy of ``values``, all of which must lie in ``[low, high]``."""
    counts = [0] * (high - low + 1)
    for value in values:
        if not low <= value <= high:
            raise ValueError(f"value {value} is outside [{low}, {high}]")
        counts[value - low] += 1
    return [low + offset for offset, count in enumerate(counts) for _ in range(count)]


def _merge_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = len(items) // 2
    left, left_count = _merge_count(items[:mid])
    right, right_count = _merge_count(items[mid:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def inversions(values: Sequence[int]) -> int:
    """Number of pairs ``i < j`` with ``values[i] > values[j]``, by merge sort."""
    return _merge_count(list(values))[1]


def _partition(items: list[int], start: int, end: int) -> int:
    pivot = items[end]
    i = start - 1
    for j in range(start, end):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[end] = items[end], items[i + 1]
    return i + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Sorted copy of ``values`` by quicksort with the last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot = _partition(items, start, end)
        pending.append((start, pivot - 1))
        pending.append((pivot + 1, end))
    return items


def random_sort(values: MutableSequence, rng: random.Random | None = None) -> None:
    """Shuffle ``values`` in place; not suitable for security purposes."""
    (rng or random).shuffle(values)