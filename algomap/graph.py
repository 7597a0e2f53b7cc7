"""Shortest paths on an undirected weighted graph with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import math


class Dijkstra:
    """Undirected graph with nodes numbered 1..node_count."""

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError("node count must not be negative")
        self.node_count = node_count
        self._graph: list[list[tuple[int, int]]] = [[] for _ in range(node_count + 1)]

    def _check(self, node: int) -> None:
        if not 0 <= node <= self.node_count:
            raise IndexError(f"node {node} is out of range")

    def add_edge(self, a: int, b: int, w: int) -> None:
        """Add an undirected edge between a and b with weight w."""
        self._check(a)
        self._check(b)
        self._graph[a].append((b, w))
        self._graph[b].append((a, w))

    def find_shortest_path(self, start: int, end: int) -> list[int]:
        """Return the nodes of a shortest path from start to end, or [] if unreachable."""
        self._check(start)
        self._check(end)
        dist = [math.inf] * (self.node_count + 1)
        prev = [-1] * (self.node_count + 1)
        dist[start] = 0
        queue = [(0, start)]
        while queue:
            current_dist, node = heapq.heappop(queue)
            if current_dist > dist[node]:
                continue
            for neighbour, weight in self._graph[node]:
                new_dist = current_dist + weight
                if new_dist < dist[neighbour]:
                    dist[neighbour] = new_dist
                    prev[neighbour] = node
                    heapq.heappush(queue, (new_dist, neighbour))

        if dist[end] == math.inf:
            return []
        path = []
        current = end
        while current != -1:
            path.append(current)
            current = prev[current]
        path.reverse()
        return path


_CASES = [
    (5, [(1, 2, 1), (1, 3, 2), (2, 4, 3), (3, 4, 4), (3, 5, 5), (4, 5, 1)]),
    (
        8,
        [
            (1, 2, 4), (1, 3, 2), (2, 3, 1), (2, 4, 7), (3, 5, 3), (3, 6, 9),
            (4, 5, 2), (4, 7, 5), (5, 6, 8), (5, 7, 1), (6, 8, 2), (7, 8, 3),
        ],
    ),
]


def main(argv: list[str] | None = None) -> int:
    """Print the shortest path from node 1 to the last node for each sample graph."""
    for n, edges in _CASES:
        graph = Dijkstra(n)
        for a, b, w in edges:
            graph.add_edge(a, b, w)
        path = graph.find_shortest_path(1, n)
        print(" ".join(map(str, path)) if path else -1)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())