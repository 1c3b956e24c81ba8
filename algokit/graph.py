"""Reachability and path enumeration on graphs."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Iterator, Sequence


def valid_path(n: int, edges: Iterable[Sequence[int]], start: int, end: int) -> bool:
    """Return whether ``end`` can be reached from ``start`` in an undirected graph."""
    if not (0 <= start < n and 0 <= end < n):
        raise IndexError("start and end must be vertices of the graph")
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == end:
            return True
        for neighbour in adjacency[current]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return False


def all_paths_source_target(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """List every path from node 0 to the last node of a directed acyclic graph."""
    target = len(graph) - 1

    def walk(node: int, path: list[int]) -> Iterator[list[int]]:
        path.append(node)
        if node == target:
            yield list(path)
        for successor in graph[node]:
            yield from walk(successor, path)
        path.pop()

    if not graph:
        return []
    return list(walk(0, []))