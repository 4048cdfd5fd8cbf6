"""Assignment problems: minimum-cost matching and stable marriage."""

from __future__ import annotations

import math
from collections.abc import Sequence


def hungarian(cost: Sequence[Sequence[int]]) -> tuple[int, list[tuple[int, int]]]:
    """Minimum-cost assignment of every row to a distinct column.

    Needs at least as many columns as rows. Returns the total cost and the
    matched ``(row, column)`` pairs ordered by column.
    """
    n = len(cost)
    if n == 0:
        raise ValueError("cost matrix has no rows")
    m = len(cost[0])
    if n > m:
        raise ValueError("cost matrix has more rows than columns")
    u = [0] * (n + 1)
    v = [0] * (m + 1)
    owner = [0] * (m + 1)
    way = [0] * (m + 1)
    for row in range(1, n + 1):
        owner[0] = row
        j0 = 0
        min_slack = [math.inf] * (m + 1)
        used = [False] * (m + 1)
        while owner[j0] != 0:
            used[j0] = True
            i0 = owner[j0]
            delta = math.inf
            j1 = 0
            for j in range(1, m + 1):
                if used[j]:
                    continue
                slack = cost[i0 - 1][j - 1] - u[i0] - v[j]
                if slack < min_slack[j]:
                    min_slack[j] = slack
                    way[j] = j0
                if min_slack[j] < delta:
                    delta = min_slack[j]
                    j1 = j
            for j in range(m + 1):
                if used[j]:
                    u[owner[j]] += delta
                    v[j] -= delta
                else:
                    min_slack[j] -= delta
            j0 = j1
        while j0:
            j1 = way[j0]
            owner[j0] = owner[j1]
            j0 = j1
    pairs = [(owner[j] - 1, j - 1) for j in range(1, m + 1) if owner[j]]
    return -v[0], pairs


def stable_matching(
    pref_a: Sequence[Sequence[int]], pref_b: Sequence[Sequence[int]]
) -> list[int]:
    """Stable matching that is best for group A by Gale-Shapley.

    Preferences list indices from most to least preferred. Returns, for each
    member of group B, the member of group A it is matched to.
    """
    n = len(pref_a)
    rank = [{a: position for position, a in enumerate(prefs)} for prefs in pref_b]
    match: list[int | None] = [None] * n
    next_choice = [0] * n
    for a in range(n):
        suitor: int | None = a
        while suitor is not None:
            b = pref_a[suitor][next_choice[suitor]]
            next_choice[suitor] += 1
            current = match[b]
            if current is None:
                match[b] = suitor
                suitor = None
            elif rank[b][suitor] < rank[b][current]:
                match[b] = suitor
                suitor = current
    return match