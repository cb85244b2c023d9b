"""Depth-first traversals: components, topological order and strong components.

Vertices are numbered from zero; edges are ``(start, end)`` pairs.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_WHITE, _GRAY, _BLACK = 0, 1, 2


class CycleError(ValueError):
    """Raised when a directed graph that must be acyclic has a cycle."""


def _adjacency(
    vertex_count: int,
    edges: Iterable[tuple[int, int]],
    *,
    undirected: bool = False,
    skip_loops: bool = False,
) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for start, end in edges:
        if not (0 <= start < vertex_count and 0 <= end < vertex_count):
            raise ValueError(f"edge ({start}, {end}) names a vertex outside 0..{vertex_count - 1}")
        if skip_loops and start == end:
            continue
        adjacency[start].append(end)
        if undirected:
            adjacency[end].append(start)
    return adjacency


def _preorder(adjacency: Sequence[Sequence[int]], root: int, seen: list[bool]) -> list[int]:
    """Vertices reached from root, in recursive depth-first visiting order."""
    seen[root] = True
    order = [root]
    iterators = [iter(adjacency[root])]
    while iterators:
        for neighbour in iterators[-1]:
            if not seen[neighbour]:
                seen[neighbour] = True
                order.append(neighbour)
                iterators.append(iter(adjacency[neighbour]))
                break
        else:
            iterators.pop()
    return order


def _postorder(
    adjacency: Sequence[Sequence[int]],
    root: int,
    color: list[int],
    finished: list[int],
    *,
    detect_cycles: bool = False,
) -> None:
    """Append vertices reached from root to ``finished`` as they are completed."""
    color[root] = _GRAY
    path = [root]
    iterators = [iter(adjacency[root])]
    while iterators:
        for neighbour in iterators[-1]:
            if color[neighbour] == _GRAY and detect_cycles:
                raise CycleError(f"cycle through vertex {neighbour}")
            if color[neighbour] == _WHITE:
                color[neighbour] = _GRAY
                path.append(neighbour)
                iterators.append(iter(adjacency[neighbour]))
                break
        else:
            vertex = path.pop()
            iterators.pop()
            color[vertex] = _BLACK
            finished.append(vertex)


def connected_components(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Connected components of an undirected graph.

    Components come in order of their smallest vertex; each lists its
    vertices in depth-first visiting order. Loops are ignored.
    """
    adjacency = _adjacency(vertex_count, edges, undirected=True, skip_loops=True)
    seen = [False] * vertex_count
    return [
        _preorder(adjacency, start, seen)
        for start in range(vertex_count)
        if not seen[start]
    ]


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order the vertices so that every edge points forward.

    Raises CycleError if the graph has a directed cycle (a loop included).
    """
    adjacency = _adjacency(vertex_count, edges)
    color = [_WHITE] * vertex_count
    finished: list[int] = []
    for start in range(vertex_count):
        if color[start] == _WHITE:
            _postorder(adjacency, start, color, finished, detect_cycles=True)
    finished.reverse()
    return finished


def strongly_connected_components(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[int]:
    """Label each vertex with the number of its strongly connected component.

    Labels start at 0 and follow a topological order of the condensation:
    every edge goes from a component to one with an equal or larger label.
    """
    edges = list(edges)
    adjacency = _adjacency(vertex_count, edges)
    color = [_WHITE] * vertex_count
    finished: list[int] = []
    for start in range(vertex_count):
        if color[start] == _WHITE:
            _postorder(adjacency, start, color, finished)

    transposed = _adjacency(vertex_count, ((end, start) for start, end in edges))
    seen = [False] * vertex_count
    labels = [0] * vertex_count
    component = 0
    for vertex in reversed(finished):
        if seen[vertex]:
            continue
        for member in _preorder(transposed, vertex, seen):
            labels[member] = component
        component += 1
    return labels