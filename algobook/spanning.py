"""Minimum spanning trees of undirected weighted graphs.

Graphs are adjacency lists of ``(vertex, weight)`` pairs and must list every
edge in both directions.
"""

from __future__ import annotations

import heapq
from collections.abc import Sequence

from .structures import DisjointUnion

WeightedGraph = Sequence[Sequence[tuple[int, int]]]


def kruskal(graph: WeightedGraph) -> tuple[int, list[tuple[int, int]]]:
    """Minimum spanning tree by Kruskal's algorithm.

    Returns the total weight and the tree edges ``(u, v)`` with ``u < v``,
    in the order they were chosen.
    """
    edges = sorted(
        (weight, (vertex, neighbour))
        for vertex, adjacent in enumerate(graph)
        for neighbour, weight in adjacent
        if vertex < neighbour
    )
    dsu = DisjointUnion(len(graph))
    tree: list[tuple[int, int]] = []
    total = 0
    for weight, (u, v) in edges:
        if dsu.find(u) != dsu.find(v):
            dsu.combine(u, v)
            tree.append((u, v))
            total += weight
    return total, tree


def prim(graph: WeightedGraph) -> tuple[int, list[tuple[int, int]]]:
    """Minimum spanning tree by Prim's algorithm, grown from vertex 0.

    Returns the total weight and the tree edges ``(tree vertex, new vertex)``
    in the order they were added. Raises ValueError for an empty graph.
    """
    if not graph:
        raise ValueError("graph has no vertices")
    done = [False] * len(graph)
    done[0] = True
    heap = [(weight, 0, neighbour) for neighbour, weight in graph[0]]
    heapq.heapify(heap)
    tree: list[tuple[int, int]] = []
    total = 0
    while heap:
        weight, source, vertex = heapq.heappop(heap)
        if done[vertex]:
            continue
        done[vertex] = True
        tree.append((source, vertex))
        total += weight
        for neighbour, edge_weight in graph[vertex]:
            if not done[neighbour]:
                heapq.heappush(heap, (edge_weight, vertex, neighbour))
    return total, tree