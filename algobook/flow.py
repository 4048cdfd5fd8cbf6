"""Maximum flow by Edmonds-Karp on an adjacency-matrix network."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _augmenting_path(
    residual: list[list[int]], neighbours: list[list[int]], source: int, sink: int
) -> dict[int, int] | None:
    """Breadth-first search for a path with spare capacity; maps vertex to predecessor."""
    previous: dict[int, int] = {}
    visited = {source}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        for vertex in neighbours[current]:
            if vertex not in visited and residual[current][vertex] > 0:
                previous[vertex] = current
                if vertex == sink:
                    return previous
                visited.add(vertex)
                queue.append(vertex)
    return None


def max_flow(
    capacity: Sequence[Sequence[int]], source: int, sink: int
) -> tuple[int, list[list[int]]]:
    """Maximum flow from ``source`` to ``sink`` and the final residual matrix."""
    residual = [list(row) for row in capacity]
    neighbours: list[list[int]] = [[] for _ in capacity]
    for i, row in enumerate(capacity):
        for j, value in enumerate(row):
            if value != 0:
                neighbours[i].append(j)
                neighbours[j].append(i)
    total = 0
    while (previous := _augmenting_path(residual, neighbours, source, sink)) is not None:
        path = []
        vertex = sink
        while vertex != source:
            path.append((previous[vertex], vertex))
            vertex = previous[vertex]
        flow = min(residual[u][v] for u, v in path)
        for u, v in path:
            residual[u][v] -= flow
            residual[v][u] += flow
        total += flow
    return total, residual