"""Graph structure: bipartiteness, cycles, components, Euler tours and orderings.

Graphs are adjacency lists indexed by vertex. An entry may be a plain vertex
index or a ``(vertex, weight)`` pair; weights are ignored here.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from typing import Union

from .structures import DisjointUnion

Edge = Union[int, Sequence[int]]
Graph = Sequence[Sequence[Edge]]


def _target(edge: Edge) -> int:
    return edge if isinstance(edge, int) else edge[0]


def _neighbours(graph: Graph, vertex: int) -> list[int]:
    return [_target(edge) for edge in graph[vertex]]


def _adjacency(graph: Graph) -> list[list[int]]:
    return [_neighbours(graph, v) for v in range(len(graph))]


def _reversed(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    reverse: list[list[int]] = [[] for _ in adjacency]
    for vertex, targets in enumerate(adjacency):
        for target in targets:
            reverse[target].append(vertex)
    return reverse


def _postorder(
    adjacency: Sequence[Sequence[int]], root: int, visited: list[bool]
) -> Iterator[int]:
    """Yield the unvisited vertices reachable from ``root`` in DFS post-order."""
    visited[root] = True
    stack = [(root, iter(adjacency[root]))]
    while stack:
        node, pending = stack[-1]
        for nxt in pending:
            if not visited[nxt]:
                visited[nxt] = True
                stack.append((nxt, iter(adjacency[nxt])))
                break
        else:
            stack.pop()
            yield node


def is_bipartite(graph: Graph) -> bool:
    """Return whether an undirected graph can be 2-coloured."""
    group: list[int | None] = [None] * len(graph)
    for start in range(len(graph)):
        if group[start] is not None:
            continue
        group[start] = 0
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in _neighbours(graph, current):
                if group[neighbour] == group[current]:
                    return False
                if group[neighbour] is None:
                    group[neighbour] = 1 - group[current]
                    queue.append(neighbour)
    return True


def has_directed_cycle(graph: Graph) -> bool:
    """Return whether a directed graph contains a cycle (self-loops included)."""
    fresh, active, finished = 0, 1, 2
    state = [fresh] * len(graph)
    adjacency = _adjacency(graph)
    for root in range(len(graph)):
        if state[root] != fresh:
            continue
        state[root] = active
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, pending = stack[-1]
            for nxt in pending:
                if state[nxt] == active:
                    return True
                if state[nxt] == fresh:
                    state[nxt] = active
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                state[node] = finished
                stack.pop()
    return False


def has_undirected_cycle(graph: Graph) -> bool:
    """Return whether an undirected graph, listing each edge both ways, has a cycle."""
    n = len(graph)
    dsu = DisjointUnion(n)
    components, edge_ends = n, 0
    for vertex in range(n):
        for neighbour in _neighbours(graph, vertex):
            if dsu.find(vertex) != dsu.find(neighbour):
                dsu.combine(vertex, neighbour)
                components -= 1
            edge_ends += 1
    return edge_ends // 2 + components != n


def strongly_connected_components(graph: Graph) -> list[list[int]]:
    """Strongly connected components by Kosaraju's algorithm.

    Each component lists its vertices in ascending order.
    """
    n = len(graph)
    adjacency = _adjacency(graph)
    reverse = _reversed(adjacency)
    visited = [False] * n
    order: list[int] = []
    for vertex in range(n):
        if not visited[vertex]:
            order.extend(_postorder(adjacency, vertex, visited))
    component: list[int | None] = [None] * n
    for root in reversed(order):
        if component[root] is not None:
            continue
        component[root] = root
        stack = [root]
        while stack:
            vertex = stack.pop()
            for source in reverse[vertex]:
                if component[source] is None:
                    component[source] = root
                    stack.append(source)
    members: list[list[int]] = [[] for _ in range(n)]
    for vertex, root in enumerate(component):
        members[root].append(vertex)
    return [group for group in members if group]


def has_directed_euler_cycle(graph: Graph) -> bool:
    """Return whether a directed graph has an Eulerian cycle."""
    if len(strongly_connected_components(graph)) != 1:
        return False
    indegree = [0] * len(graph)
    for vertex in range(len(graph)):
        for neighbour in _neighbours(graph, vertex):
            indegree[neighbour] += 1
    return all(indegree[v] == len(graph[v]) for v in range(len(graph)))


def has_undirected_euler_cycle(graph: Graph) -> bool:
    """Return whether an undirected graph has an Eulerian cycle.

    Raises ValueError for a graph without vertices.
    """
    if not graph:
        raise ValueError("graph has no vertices")
    dsu = DisjointUnion(len(graph))
    for vertex in range(len(graph)):
        for neighbour in _neighbours(graph, vertex):
            dsu.combine(vertex, neighbour)
    root = dsu.find(0)
    if any(dsu.find(v) != root for v in range(len(graph))):
        return False
    return all(len(edges) % 2 == 0 for edges in graph)


def euler_cycle(graph: Graph, start: int = 0, directed: bool = False) -> list[int]:
    """Eulerian cycle from ``start`` by Hierholzer's algorithm.

    The cycle is assumed to exist. At each step the smallest unused
    neighbour is taken.
    """
    remaining = [set(_neighbours(graph, v)) for v in range(len(graph))]
    path: list[int] = []
    cycle: list[int] = []
    current = start
    while True:
        if remaining[current]:
            path.append(current)
            nxt = min(remaining[current])
            remaining[current].discard(nxt)
            if not directed:
                remaining[nxt].discard(current)
            current = nxt
        else:
            cycle.append(current)
            if not path:
                break
            current = path.pop()
    cycle.reverse()
    return cycle


def toposort(graph: Graph) -> list[int]:
    """Topological order of a directed acyclic graph."""
    n = len(graph)
    reverse = _reversed(_adjacency(graph))
    visited = [False] * n
    order: list[int] = []
    for vertex in range(n):
        if not graph[vertex] and not visited[vertex]:
            order.extend(_postorder(reverse, vertex, visited))
    return order


def greedy_coloring(graph: Graph) -> list[int]:
    """Colour vertices in index order with the lowest colour unused by neighbours."""
    colors: list[int | None] = [None] * len(graph)
    for vertex in range(len(graph)):
        used = {colors[e] for e in _neighbours(graph, vertex) if colors[e] is not None}
        color = 0
        while color in used:
            color += 1
        colors[vertex] = color
    return colors


def max_independent_set(tree: Graph) -> list[int]:
    """Maximum independent set of a rooted tree.

    The tree is given as child lists with vertex 0 as root. Vertices are
    returned in breadth-first order.
    """
    if not tree:
        return []
    order: list[int] = []
    queue = deque([0])
    while queue:
        current = queue.popleft()
        order.append(current)
        queue.extend(_neighbours(tree, current))
    include = [0] * len(tree)
    exclude = [0] * len(tree)
    for current in reversed(order):
        children = _neighbours(tree, current)
        include[current] = 1 + sum(exclude[c] for c in children)
        exclude[current] = sum(max(include[c], exclude[c]) for c in children)
    chosen: list[int] = []
    pending = deque([(0, True)])
    while pending:
        current, allowed = pending.popleft()
        take = allowed and include[current] > exclude[current]
        if take:
            chosen.append(current)
        pending.extend((child, not take) for child in _neighbours(tree, current))
    return chosen