"""Dijkstra's shortest paths on undirected weighted graphs with nodes 1..n."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

INFINITY = 1 << 30

Edge = tuple[int, int, int]


def _adjacency(node_count: int, edges: Iterable[Edge]) -> list[list[tuple[int, int]]]:
    if node_count < 1:
        raise ValueError("a graph needs at least one node")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(node_count + 1)]
    for u, v, weight in edges:
        for node in (u, v):
            if not 1 <= node <= node_count:
                raise ValueError(f"node {node} is outside 1..{node_count}")
        adjacency[u].append((weight, v))
        adjacency[v].append((weight, u))
    return adjacency


def dijkstra(node_count: int, edges: Iterable[Edge], source: int) -> dict[int, int]:
    """Return the distance from ``source`` to every node.

    ``edges`` holds undirected ``(u, v, weight)`` triples. Unreachable nodes
    get the distance ``INFINITY``.
    """
    adjacency = _adjacency(node_count, edges)
    if not 1 <= source <= node_count:
        raise ValueError(f"source {source} is outside 1..{node_count}")
    distance = dict.fromkeys(range(1, node_count + 1), INFINITY)
    distance[source] = 0
    queue = [(0, source)]
    while queue:
        _, top = heapq.heappop(queue)
        for weight, adj in adjacency[top]:
            candidate = distance[top] + weight
            if candidate < distance[adj]:
                distance[adj] = candidate
                heapq.heappush(queue, (candidate, adj))
    return distance


def shortest_path(node_count: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return the nodes of a shortest path from 1 to ``node_count``.

    Returns None when ``node_count`` cannot be reached from node 1.
    """
    adjacency = _adjacency(node_count, edges)
    distance = dict.fromkeys(range(1, node_count + 1), INFINITY)
    previous = {1: 1}
    distance[1] = 0
    queue = [(0, 1)]
    while queue:
        _, top = heapq.heappop(queue)
        if top == node_count:
            path = [node_count]
            while path[-1] != 1:
                path.append(previous[path[-1]])
            path.reverse()
            return path
        for weight, adj in adjacency[top]:
            candidate = distance[top] + weight
            if candidate < distance[adj]:
                distance[adj] = candidate
                previous[adj] = top
                heapq.heappush(queue, (candidate, adj))
    return None