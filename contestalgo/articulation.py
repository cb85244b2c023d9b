"""Articulation points of undirected graphs, and the pillow puzzle built on them.

Vertices are numbered from zero.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_WHITE, _GRAY, _BLACK = 0, 1, 2


def _cut_vertices(adjacency: Sequence[Sequence[int]]) -> set[int]:
    """Vertices whose removal increases the number of connected components."""
    n = len(adjacency)
    color = [_WHITE] * n
    time_in = [0] * n
    time_up = [0] * n
    points: set[int] = set()
    timer = 0
    for root in range(n):
        if color[root] != _WHITE:
            continue
        timer += 1
        time_in[root] = time_up[root] = timer
        color[root] = _GRAY
        children = 0
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if color[neighbour] == _GRAY:
                    time_up[vertex] = min(time_up[vertex], time_in[neighbour])
                elif color[neighbour] == _WHITE:
                    if vertex == root:
                        children += 1
                    timer += 1
                    time_in[neighbour] = time_up[neighbour] = timer
                    color[neighbour] = _GRAY
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                color[vertex] = _BLACK
                if stack:
                    parent = stack[-1][0]
                    time_up[parent] = min(time_up[parent], time_up[vertex])
                    if parent != root and time_in[parent] <= time_up[vertex]:
                        points.add(parent)
        if children > 1:
            points.add(root)
    return points


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} outside 0..{vertex_count - 1}")


def articulation_points(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Sorted articulation points of an undirected graph."""
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for start, end in edges:
        _check_vertex(start, vertex_count)
        _check_vertex(end, vertex_count)
        adjacency[start].append(end)
        adjacency[end].append(start)
    return sorted(_cut_vertices(adjacency))


def critical_pillows(
    vertex_count: int, pillows: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Indices of the pillows whose removal disconnects some of their corners.

    Each pillow joins three vertices. It is modelled as an extra vertex linked
    to its three corners; the critical pillows are those extra vertices that
    are articulation points.
    """
    pillows = list(pillows)
    adjacency: list[list[int]] = [[] for _ in range(vertex_count + len(pillows))]
    for index, corners in enumerate(pillows):
        node = vertex_count + index
        for corner in corners:
            _check_vertex(corner, vertex_count)
            adjacency[corner].append(node)
            adjacency[node].append(corner)
    return sorted(
        point - vertex_count for point in _cut_vertices(adjacency) if point >= vertex_count
    )