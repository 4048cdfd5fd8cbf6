import random
from collections import Counter

import pytest

from algobook.connectivity import (
    euler_cycle,
    greedy_coloring,
    has_directed_cycle,
    has_directed_euler_cycle,
    has_undirected_cycle,
    has_undirected_euler_cycle,
    is_bipartite,
    max_independent_set,
    strongly_connected_components,
    toposort,
)


def cycle_graph(n):
    return [[(i - 1) % n, (i + 1) % n] for i in range(n)]


def complete_graph(n):
    return [[j for j in range(n) if j != i] for i in range(n)]


def directed_cycle(n):
    return [[(i + 1) % n] for i in range(n)]


def path_graph(n):
    graph = [[] for _ in range(n)]
    for i in range(n - 1):
        graph[i].append(i + 1)
        graph[i + 1].append(i)
    return graph


def disjoint(first, second):
    offset = len(first)
    return [list(edges) for edges in first] + [
        [e + offset for e in edges] for edges in second
    ]


def random_dag(seed, n=12, p=0.3):
    rng = random.Random(seed)
    graph = [[] for _ in range(n)]
    graph[0].append(1)
    for a in range(n):
        for b in range(a + 1, n):
            if (a, b) != (0, 1) and rng.random() < p:
                graph[a].append(b)
    return graph


def random_digraph(seed, n=10, p=0.2):
    rng = random.Random(seed)
    return [[b for b in range(n) if b != a and rng.random() < p] for a in range(n)]


def random_tree(seed, n=15):
    rng = random.Random(seed)
    children = [[] for _ in range(n)]
    parent = [None] * n
    for child in range(1, n):
        p = rng.randrange(child)
        children[p].append(child)
        parent[child] = p
    return children, parent


def reach_set(graph, start):
    seen = {start}
    stack = [start]
    while stack:
        for e in graph[stack.pop()]:
            if e not in seen:
                seen.add(e)
                stack.append(e)
    return seen


def undirected_edge_counts(graph):
    counts = Counter()
    for a, edges in enumerate(graph):
        for b in edges:
            counts[frozenset((a, b))] += 1
    return Counter({edge: c // 2 for edge, c in counts.items()})


@pytest.mark.parametrize("n", range(3, 9))
def test_cycle_is_bipartite_iff_even(n):
    assert is_bipartite(cycle_graph(n)) == (n % 2 == 0)


def test_bipartite_random_graph_and_odd_cycle():
    rng = random.Random(3)
    n = 10
    graph = [[] for _ in range(n)]
    for a in range(0, n, 2):
        for b in range(1, n, 2):
            if (a, b) in ((0, 1), (2, 1)) or rng.random() < 0.4:
                graph[a].append(b)
                graph[b].append(a)
    assert is_bipartite(graph)
    graph[0].append(2)
    graph[2].append(0)
    assert not is_bipartite(graph)


def test_bipartite_checks_every_component():
    assert not is_bipartite(disjoint(cycle_graph(4), cycle_graph(3)))
    assert is_bipartite(disjoint(cycle_graph(4), cycle_graph(6)))


@pytest.mark.parametrize("seed", range(5))
def test_dag_has_no_directed_cycle_until_back_edge(seed):
    graph = random_dag(seed)
    assert not has_directed_cycle(graph)
    graph[1].append(0)
    assert has_directed_cycle(graph)


def test_directed_cycle_detection_on_loops_and_weighted_edges():
    assert has_directed_cycle([[0]])
    assert has_directed_cycle(directed_cycle(5))
    assert not has_directed_cycle([[(1, 5)], [(2, 7)], []])
    assert has_directed_cycle([[(1, 5)], [(0, 7)]])


@pytest.mark.parametrize("seed", range(4))
def test_tree_has_no_undirected_cycle_until_extra_edge(seed):
    children, parent = random_tree(seed)
    graph = [[] for _ in children]
    for child, p in enumerate(parent):
        if p is not None:
            graph[child].append(p)
            graph[p].append(child)
    assert not has_undirected_cycle(graph)
    target = next(v for v in range(1, len(graph)) if parent[v] != 0)
    graph[0].append(target)
    graph[target].append(0)
    assert has_undirected_cycle(graph)


def test_undirected_cycle_on_forest_and_cycle():
    assert not has_undirected_cycle(disjoint(path_graph(4), path_graph(5)))
    assert has_undirected_cycle(disjoint(path_graph(4), cycle_graph(5)))


@pytest.mark.parametrize("seed", range(6))
def test_components_partition_and_mutual_reachability(seed):
    graph = random_digraph(seed)
    components = strongly_connected_components(graph)
    flat = sorted(v for comp in components for v in comp)
    assert flat == list(range(len(graph)))
    reach = [reach_set(graph, v) for v in range(len(graph))]
    label = {v: i for i, comp in enumerate(components) for v in comp}
    for a in range(len(graph)):
        assert components[label[a]] == sorted(components[label[a]])
        for b in range(len(graph)):
            mutual = b in reach[a] and a in reach[b]
            assert mutual == (label[a] == label[b])


def test_components_of_cycle_and_dag():
    assert strongly_connected_components(directed_cycle(5)) == [list(range(5))]
    dag = random_dag(1)
    assert len(strongly_connected_components(dag)) == len(dag)


@pytest.mark.parametrize("n", range(2, 7))
def test_directed_euler_on_cycles_and_complete_graphs(n):
    assert has_directed_euler_cycle(directed_cycle(n))
    assert has_directed_euler_cycle(complete_graph(n))


def test_directed_euler_rejects_unbalanced_or_disconnected():
    graph = directed_cycle(4)
    graph[0].append(2)
    assert not has_directed_euler_cycle(graph)
    assert not has_directed_euler_cycle(directed_cycle(4) + [[]])


@pytest.mark.parametrize("n", range(3, 8))
def test_undirected_euler_on_complete_graphs(n):
    assert has_undirected_euler_cycle(complete_graph(n)) == (n % 2 == 1)


def test_undirected_euler_rejects_paths_and_split_graphs():
    assert has_undirected_euler_cycle(cycle_graph(5))
    assert not has_undirected_euler_cycle(path_graph(4))
    assert not has_undirected_euler_cycle(disjoint(cycle_graph(3), cycle_graph(3)))


def test_undirected_euler_empty_graph_raises():
    with pytest.raises(ValueError):
        has_undirected_euler_cycle([])


@pytest.mark.parametrize(
    "graph,start",
    [(complete_graph(5), 0), (complete_graph(7), 3), (cycle_graph(6), 2)],
)
def test_euler_cycle_uses_every_edge_once(graph, start):
    cycle = euler_cycle(graph, start)
    assert cycle[0] == cycle[-1] == start
    used = Counter(frozenset(pair) for pair in zip(cycle, cycle[1:]))
    assert used == undirected_edge_counts(graph)


def test_directed_euler_cycle_uses_every_arc_once():
    graph = complete_graph(4)
    cycle = euler_cycle(graph, 1, directed=True)
    assert cycle[0] == cycle[-1] == 1
    arcs = list(zip(cycle, cycle[1:]))
    assert sorted(arcs) == sorted((a, b) for a, edges in enumerate(graph) for b in edges)


def test_euler_cycle_takes_smallest_neighbour_first():
    assert euler_cycle(cycle_graph(3)) == [0, 1, 2, 0]
    assert euler_cycle([[]]) == [0]


@pytest.mark.parametrize("seed", range(5))
def test_toposort_respects_every_edge(seed):
    graph = random_dag(seed)
    order = toposort(graph)
    assert sorted(order) == list(range(len(graph)))
    position = {v: i for i, v in enumerate(order)}
    for a, edges in enumerate(graph):
        for b in edges:
            assert position[a] < position[b]


def test_toposort_accepts_weighted_edges():
    graph = [[(1, 4)], [(2, 9)], []]
    assert toposort(graph) == [0, 1, 2]


@pytest.mark.parametrize("seed", range(5))
def test_greedy_coloring_is_proper(seed):
    rng = random.Random(seed)
    n = 12
    graph = [[] for _ in range(n)]
    for a in range(n):
        for b in range(a + 1, n):
            if rng.random() < 0.3:
                graph[a].append(b)
                graph[b].append(a)
    colors = greedy_coloring(graph)
    assert colors[0] == 0
    for a, edges in enumerate(graph):
        assert colors[a] <= len(edges)
        for b in edges:
            assert colors[a] != colors[b]


def test_greedy_coloring_known_graphs():
    assert greedy_coloring(cycle_graph(6)) == [0, 1, 0, 1, 0, 1]
    assert greedy_coloring(complete_graph(5)) == list(range(5))


@pytest.mark.parametrize("seed", range(6))
def test_max_independent_set_is_independent_and_maximal(seed):
    children, parent = random_tree(seed)
    chosen = set(max_independent_set(children))
    for v in range(len(children)):
        neighbours = list(children[v]) + ([parent[v]] if parent[v] is not None else [])
        if v in chosen:
            assert not any(u in chosen for u in neighbours)
        else:
            assert any(u in chosen for u in neighbours)


def test_max_independent_set_star_and_path():
    star = [[1, 2, 3, 4, 5], [], [], [], [], []]
    assert sorted(max_independent_set(star)) == [1, 2, 3, 4, 5]
    assert max_independent_set([[1], [2], []]) == [0, 2]
    assert max_independent_set([]) == []