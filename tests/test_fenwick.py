import pytest

from contestalgo.fenwick import Fenwick3D


def test_empty_cube_sums_to_zero():
    tree = Fenwick3D(3)
    assert tree.range_sum(0, 0, 0, 2, 2, 2) == 0


def test_single_cell_holds_added_value():
    tree = Fenwick3D(4)
    tree.add(1, 2, 3, 5)
    assert tree.range_sum(1, 2, 3, 1, 2, 3) == 5
    assert tree.range_sum(0, 0, 0, 3, 3, 3) == 5
    assert tree.range_sum(2, 0, 0, 3, 3, 3) == 0


def test_additions_accumulate():
    tree = Fenwick3D(2)
    tree.add(0, 1, 0, 3)
    tree.add(0, 1, 0, 4)
    tree.add(1, 1, 1, -2)
    assert tree.range_sum(0, 1, 0, 0, 1, 0) == 3 + 4
    assert tree.range_sum(0, 0, 0, 1, 1, 1) == 3 + 4 - 2


def test_prefix_sum_with_negative_coordinate_is_zero():
    tree = Fenwick3D(2)
    tree.add(0, 0, 0, 9)
    assert tree.prefix_sum(-1, 1, 1) == 0
    assert tree.prefix_sum(0, 0, 0) == 9


def test_box_splits_add_up():
    tree = Fenwick3D(5)
    cells = [(0, 0, 0, 1), (4, 4, 4, 2), (2, 3, 1, 7), (1, 1, 4, -3), (3, 0, 2, 11)]
    for x, y, z, value in cells:
        tree.add(x, y, z, value)
    whole = tree.range_sum(0, 0, 0, 4, 4, 4)
    assert whole == sum(value for *_, value in cells)
    for split in range(4):
        assert (
            tree.range_sum(0, 0, 0, split, 4, 4) + tree.range_sum(split + 1, 0, 0, 4, 4, 4)
            == whole
        )
        assert (
            tree.range_sum(0, 0, 0, 4, 4, split) + tree.range_sum(0, 0, split + 1, 4, 4, 4)
            == whole
        )


def test_out_of_range_point_raises():
    tree = Fenwick3D(2)
    with pytest.raises(IndexError):
        tree.add(2, 0, 0, 1)


def test_reversed_box_raises():
    tree = Fenwick3D(3)
    with pytest.raises(ValueError):
        tree.range_sum(2, 0, 0, 1, 2, 2)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Fenwick3D(-1)