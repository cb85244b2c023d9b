import pytest

from contestalgo.articulation import articulation_points, critical_pillows
from contestalgo.traversal import connected_components


def _component_count(vertex_count, edges, removed):
    kept = [(a, b) for a, b in edges if removed not in (a, b)]
    return len(connected_components(vertex_count, kept)) - 1


GRAPHS = [
    (3, [(0, 1), (1, 2)]),
    (5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4)]),
    (4, [(0, 1), (1, 2), (2, 3), (3, 0)]),
    (7, [(0, 1), (0, 2), (0, 3), (4, 5), (5, 6), (6, 4), (3, 4)]),
    (4, [(0, 1), (0, 1), (2, 3)]),
    (1, []),
]


@pytest.mark.parametrize("vertex_count,edges", GRAPHS)
def test_articulation_points_match_removal(vertex_count, edges):
    points = set(articulation_points(vertex_count, edges))
    base = len(connected_components(vertex_count, edges))
    for v in range(vertex_count):
        increases = _component_count(vertex_count, edges, v) > base
        assert (v in points) == increases


def test_articulation_points_path():
    assert articulation_points(3, [(0, 1), (1, 2)]) == [1]


def test_articulation_points_cycle_has_none():
    assert articulation_points(4, [(0, 1), (1, 2), (2, 3), (3, 0)]) == []


def test_articulation_points_sorted():
    result = articulation_points(7, GRAPHS[3][1])
    assert result == sorted(result)
    assert len(result) == len(set(result))


def test_articulation_points_reject_bad_vertex():
    with pytest.raises(ValueError):
        articulation_points(2, [(0, 2)])


def test_single_pillow_is_critical():
    assert critical_pillows(3, [(0, 1, 2)]) == [0]


def test_doubled_pillow_is_not_critical():
    assert critical_pillows(3, [(0, 1, 2), (0, 1, 2)]) == []


def test_pillow_chain_invariant():
    pillows = [(0, 1, 2), (2, 3, 4), (0, 1, 2)]
    result = critical_pillows(5, pillows)
    assert 1 in result
    assert all(0 <= index < len(pillows) for index in result)
    assert 0 not in result and 2 not in result


def test_pillow_rejects_bad_corner():
    with pytest.raises(ValueError):
        critical_pillows(3, [(0, 1, 3)])