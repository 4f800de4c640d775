"""Shortest-path problems on weighted undirected graphs."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


def _shortest_distances(
    adjacency: list[list[tuple[int, int]]], source: int
) -> list[float]:
    dist: list[float] = [math.inf] * len(adjacency)
    dist[source] = 0
    queue = [(0, source)]
    while queue:
        distance, node = heapq.heappop(queue)
        if distance > dist[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))
    return dist


def find_the_city(
    n: int, edges: Sequence[Sequence[int]], distance_threshold: int
) -> int:
    """Return the city reaching the fewest others within distance_threshold.

    Ties go to the city with the greatest number. Edges are (from, to, weight).
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for edge in edges:
        if len(edge) != 3:
            raise ValueError(f"edge {edge!r} must be (from, to, weight)")
        u, v, weight = edge
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge {edge!r} names a city outside 0..{n - 1}")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    best_city, fewest = 0, math.inf
    for source in range(n):
        dist = _shortest_distances(adjacency, source)
        count = sum(
            1
            for node, d in enumerate(dist)
            if node != source and d <= distance_threshold
        )
        if count <= fewest:
            best_city, fewest = source, count
    return best_city