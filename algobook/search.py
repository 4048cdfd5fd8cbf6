"""Searching: binary search on predicates, interpolation search and ternary search."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def binary_search(predicate: Callable[[int], bool], start: int, end: int) -> int:
    """Lowest value in ``[start, end]`` for which a monotone ``predicate`` holds.

    Returns ``end`` if the predicate holds nowhere before it.
    """
    while start < end:
        mid = (start + end) // 2
        if predicate(mid):
            end = mid
        else:
            start = mid + 1
    return start


def interpolation_search(values: Sequence[int], x: int) -> int:
    """Index of ``x`` in the sorted ``values``, or -1 if it is absent."""
    start, end = 0, len(values) - 1
    while start <= end and values[start] <= x <= values[end]:
        if values[start] == values[end]:
            return start
        pos = start + (end - start) * (x - values[start]) // (values[end] - values[start])
        if values[pos] == x:
            return pos
        if values[pos] < x:
            start = pos + 1
        else:
            end = pos - 1
    return -1


def ternary_search(f: Callable[[int], float], start: int, end: int) -> int:
    """Argument in ``[start, end]`` maximising a unimodal function ``f``."""
    if end < start:
        raise ValueError("empty interval")
    while end - start > 2:
        third = (end - start) // 3
        left, right = start + third, end - third
        if f(left) < f(right):
            start = left + 1
        else:
            end = right
    return max(range(start, end + 1), key=f)