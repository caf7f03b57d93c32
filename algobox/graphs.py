"""Directed graphs: traversal, Hamiltonian paths, strong components and tree cuts."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, Sequence


def _finish_order(adjacency: Sequence[Sequence[int]], roots: Iterable[int]) -> list[int]:
    """Return vertices in the order a depth-first search finishes them."""
    visited = [False] * len(adjacency)
    finished: list[int] = []
    for root in roots:
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    return finished


class Graph:
    """A directed graph on the vertices ``0..vertices-1`` held as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"vertex {vertex} is outside 0..{len(self._adjacency) - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Add the directed edge ``u -> v``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)

    def dfs_order(self) -> list[int]:
        """Return the depth-first preorder, starting new searches from 0 upwards."""
        visited = [False] * len(self._adjacency)
        order: list[int] = []
        for root in range(len(self._adjacency)):
            stack = [root]
            while stack:
                vertex = stack.pop()
                if visited[vertex]:
                    continue
                visited[vertex] = True
                order.append(vertex)
                stack.extend(reversed(self._adjacency[vertex]))
        return order

    def hamiltonian_paths(self, start: int) -> Iterator[list[int]]:
        """Yield every path from ``start`` that visits each vertex exactly once."""
        self._check(start)
        size = len(self._adjacency)
        path = [start]
        on_path = {start}

        def extend() -> Iterator[list[int]]:
            if len(path) == size:
                yield list(path)
                return
            for neighbour in self._adjacency[path[-1]]:
                if neighbour not in on_path:
                    on_path.add(neighbour)
                    path.append(neighbour)
                    yield from extend()
                    path.pop()
                    on_path.discard(neighbour)

        yield from extend()

    def _components(self) -> list[list[int]]:
        """Return the strongly connected components (Kosaraju)."""
        finish = _finish_order(self._adjacency, range(len(self._adjacency)))
        reverse: list[list[int]] = [[] for _ in self._adjacency]
        for source, targets in enumerate(self._adjacency):
            for target in targets:
                reverse[target].append(source)
        visited = [False] * len(self._adjacency)
        components = []
        for root in reversed(finish):
            if visited[root]:
                continue
            visited[root] = True
            component = []
            stack = [root]
            while stack:
                vertex = stack.pop()
                component.append(vertex)
                for neighbour in reverse[vertex]:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        stack.append(neighbour)
            components.append(component)
        return components

    def strongly_connected_count(self) -> int:
        """Return the number of strongly connected components."""
        return len(self._components())

    def topological_order(self) -> list[int]:
        """Return vertices in reverse depth-first finishing order.

        For an acyclic graph this is a topological order.
        """
        return _finish_order(self._adjacency, range(len(self._adjacency)))[::-1]

    def topological_order_kahn(self) -> list[int]:
        """Return a topological order, always taking the smallest ready vertex."""
        indegree = [0] * len(self._adjacency)
        for targets in self._adjacency:
            for target in targets:
                indegree[target] += 1
        ready = [vertex for vertex, degree in enumerate(indegree) if degree == 0]
        heapq.heapify(ready)
        order = []
        while ready:
            vertex = heapq.heappop(ready)
            order.append(vertex)
            for target in self._adjacency[vertex]:
                indegree[target] -= 1
                if indegree[target] == 0:
                    heapq.heappush(ready, target)
        if len(order) != len(self._adjacency):
            raise ValueError("graph has a cycle")
        return order


def count_cycle_edges(vertices: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count the edges lying on some cycle of a graph on vertices ``1..vertices``.

    An edge counts when both ends share a strong component of two or more vertices.
    """
    edge_list = list(edges)
    graph = Graph(vertices + 1)
    for u, v in edge_list:
        if u < 1 or v < 1:
            raise ValueError("vertices are numbered from 1")
        graph.add_edge(u, v)
    component_of: dict[int, int] = {}
    for number, component in enumerate(graph._components()):
        if len(component) > 1:
            component_of.update(dict.fromkeys(component, number))
    return sum(
        1
        for u, v in edge_list
        if u in component_of and component_of[u] == component_of.get(v)
    )


def even_forest(nodes: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return how many edges of a tree rooted at 1 can be cut leaving even components."""
    if nodes < 1:
        raise ValueError("a tree needs at least one node")
    adjacency: list[list[int]] = [[] for _ in range(nodes + 1)]
    for u, v in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= nodes:
                raise ValueError(f"vertex {vertex} is outside 1..{nodes}")
        adjacency[u].append(v)
        adjacency[v].append(u)

    parent = {1: 0}
    order = []
    stack = [1]
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        for neighbour in adjacency[vertex]:
            if neighbour not in parent:
                parent[neighbour] = vertex
                stack.append(neighbour)

    size = dict.fromkeys(order, 1)
    cuts = 0
    for vertex in reversed(order[1:]):
        if size[vertex] % 2 == 0:
            cuts += 1
        else:
            size[parent[vertex]] += size[vertex]
    return cuts