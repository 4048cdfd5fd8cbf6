"""Problems on sequences: interval covering, knapsack, increasing runs and subset sums."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence


def interval_cover(intervals: Iterable[tuple[int, int]], target: tuple[int, int]) -> bool:
    """Return whether the union of ``intervals`` covers ``target``.

    Intervals are scanned in sorted order. Intervals ending at or before the
    start of ``target`` are ignored; any later interval that starts beyond
    the covered range makes the answer False.
    """
    low, high = target
    reach = low
    for start, end in sorted(intervals):
        if end <= low:
            continue
        if start > reach:
            return False
        reach = max(reach, end)
    return reach >= high


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Maximum total value of items whose total weight fits in ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        previous = best
        best = [0] + [
            max(value + previous[w - weight], previous[w]) if weight <= w else previous[w]
            for w in range(1, capacity + 1)
        ]
    return best[capacity]


def longest_increasing(values: Iterable[int]) -> int:
    """Length of the longest non-decreasing subsequence of ``values``."""
    # tails[i] is the lowest value a subsequence of length i + 1 can end in.
    tails: list[int] = []
    for value in values:
        i = bisect_right(tails, value)
        if i == len(tails):
            tails.append(value)
        else:
            tails[i] = value
    return len(tails)


def subset_sum(values: Iterable[int], target: int) -> bool:
    """Return whether some subset of ``values`` sums to ``target``."""
    if target == 0:
        return True
    sums = {0}
    for value in values:
        reached = {s + value for s in sums}
        if target in reached:
            return True
        sums |= reached
    return False