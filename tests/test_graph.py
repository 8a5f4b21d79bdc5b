import random

import pytest

from algokit.graph import INFINITY, dijkstra, shortest_path

TRIANGLE = [(1, 2, 1), (2, 3, 1), (1, 3, 5)]


def _random_graph(seed, nodes, edge_count):
    rng = random.Random(seed)
    return [
        (rng.randint(1, nodes), rng.randint(1, nodes), rng.randint(1, 20))
        for _ in range(edge_count)
    ]


def test_triangle_distances():
    assert dijkstra(3, TRIANGLE, 1) == {1: 0, 2: 1, 3: 2}


def test_unreachable_is_infinity():
    result = dijkstra(4, [(1, 2, 3)], 1)
    assert result[3] == INFINITY
    assert result[4] == INFINITY
    assert result[1] == 0


def test_unreachable_distance_value():
    assert dijkstra(2, [], 1)[2] == 1 << 30


def test_distances_respect_edges():
    edges = _random_graph(1, 12, 25)
    distance = dijkstra(12, edges, 1)
    assert distance[1] == 0
    for u, v, w in edges:
        if distance[u] < INFINITY:
            assert distance[v] <= distance[u] + w
        if distance[v] < INFINITY:
            assert distance[u] <= distance[v] + w


def test_undirected_symmetry():
    edges = _random_graph(2, 8, 14)
    forward = dijkstra(8, edges, 2)
    for target in range(1, 9):
        assert dijkstra(8, edges, target)[2] == forward[target]


def test_bad_source_raises():
    with pytest.raises(ValueError):
        dijkstra(3, TRIANGLE, 4)


def test_bad_edge_raises():
    with pytest.raises(ValueError):
        dijkstra(3, [(1, 9, 2)], 1)


def test_triangle_path():
    assert shortest_path(3, TRIANGLE) == [1, 2, 3]


def test_single_node_path():
    assert shortest_path(1, []) == [1]


def test_unreachable_path():
    assert shortest_path(3, [(1, 2, 4)]) is None


def test_path_is_shortest():
    for seed in range(5):
        edges = _random_graph(seed + 10, 10, 22)
        path = shortest_path(10, edges)
        distance = dijkstra(10, edges, 1)
        if distance[10] == INFINITY:
            assert path is None
            continue
        assert path[0] == 1
        assert path[-1] == 10
        total = 0
        for a, b in zip(path, path[1:]):
            weights = [w for u, v, w in edges if {u, v} == {a, b}]
            assert weights
            total += min(weights)
        assert total == distance[10]


def test_zero_nodes_raises():
    with pytest.raises(ValueError):
        shortest_path(0, [])