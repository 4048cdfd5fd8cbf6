"""Shortest paths and reachability on weighted graphs.

Weighted graphs are adjacency lists of ``(vertex, weight)`` pairs. Missing
connections and unreachable vertices are represented by ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Callable, Sequence

INF = math.inf

WeightedGraph = Sequence[Sequence[tuple[int, int]]]

_FOUND = object()


def dijkstra(graph: WeightedGraph, source: int) -> tuple[list, list[int | None]]:
    """Distances from ``source`` and each vertex's predecessor on a shortest path.

    Unreachable vertices get distance ``INF``; the source and unreachable
    vertices have predecessor ``None``.
    """
    dist: list = [INF] * len(graph)
    prev: list[int | None] = [None] * len(graph)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, vertex = heapq.heappop(heap)
        if d > dist[vertex]:
            continue
        for neighbour, weight in graph[vertex]:
            candidate = d + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                prev[neighbour] = vertex
                heapq.heappush(heap, (candidate, neighbour))
    return dist, prev


def reachable(graph: WeightedGraph, source: int, max_distance: int) -> list[bool]:
    """Vertices within ``max_distance`` of ``source`` in a graph of 0/1 weights."""
    reach = [False] * len(graph)
    reach[source] = True
    current = deque([source])
    for _ in range(max_distance + 1):
        if not current:
            break
        following: deque[int] = deque()
        while current:
            vertex = current.popleft()
            reach[vertex] = True
            for neighbour, weight in graph[vertex]:
                if reach[neighbour]:
                    continue
                (following if weight else current).append(neighbour)
        current = following
    return reach


def floyd_warshall(dist: Sequence[Sequence]) -> list[list]:
    """All-pairs shortest distances from a distance matrix; ``INF`` means no edge."""
    d = [list(row) for row in dist]
    for k in range(len(d)):
        via_row = d[k]
        for row in d:
            to_k = row[k]
            if to_k == INF:
                continue
            for j, from_k in enumerate(via_row):
                if to_k + from_k < row[j]:
                    row[j] = to_k + from_k
    return d


def k_shortest(graph: WeightedGraph, source: int, sink: int, k: int) -> list[list[int]]:
    """Up to ``k`` shortest walks from ``source`` to ``sink``, shortest first."""
    count = [0] * len(graph)
    found: list[list[int]] = []
    heap: list[tuple[int, tuple[int, ...]]] = [(0, (source,))]
    while heap and count[sink] < k:
        length, path = heapq.heappop(heap)
        last = path[-1]
        count[last] += 1
        if last == sink:
            found.append(list(path))
        if count[last] < k:
            for neighbour, weight in graph[last]:
                heapq.heappush(heap, (length + weight, path + (neighbour,)))
    return found


def ida_star(
    graph: WeightedGraph,
    source: int,
    target: int,
    heuristic: Callable[[int], float] | None = None,
) -> list[int]:
    """Shortest path by iterative deepening A*; empty if ``target`` is unreachable.

    ``heuristic`` estimates the remaining distance from a vertex and defaults
    to zero.
    """
    estimate = heuristic if heuristic is not None else (lambda _vertex: 0)
    path = [source]
    on_path = {source}

    def search(cost, bound):
        current = path[-1]
        total = cost + estimate(current)
        if total > bound:
            return total
        if current == target:
            return _FOUND
        best = INF
        for neighbour, weight in graph[current]:
            if neighbour in on_path:
                continue
            path.append(neighbour)
            on_path.add(neighbour)
            result = search(cost + weight, bound)
            if result is _FOUND:
                return result
            best = min(best, result)
            path.pop()
            on_path.discard(neighbour)
        return best

    bound = estimate(source)
    while bound != INF:
        result = search(0, bound)
        if result is _FOUND:
            return list(path)
        bound = result
    return []