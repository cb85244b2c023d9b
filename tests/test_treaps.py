import random

import pytest

from contestalgo.treaps import ImplicitTreap, OrderedSet


def test_ordered_set_worked_example():
    s = OrderedSet(seed=1)
    s.insert(2)
    s.insert(5)
    s.insert(3)
    assert 2 in s
    assert 4 not in s
    assert s.next(4) == 5
    assert s.prev(4) == 3
    s.delete(5)
    assert s.next(4) is None
    assert s.prev(4) == 3


def test_ordered_set_ignores_duplicates():
    s = OrderedSet([7, 7, 3, 7, 3], seed=2)
    assert len(s) == 2
    assert list(s) == [3, 7]


def test_delete_missing_is_silent():
    s = OrderedSet([1, 2], seed=3)
    s.delete(10)
    assert list(s) == [1, 2]


def test_next_and_prev_are_strict():
    s = OrderedSet([10, 20, 30], seed=4)
    assert s.next(20) == 30
    assert s.prev(20) == 10
    assert s.next(30) is None
    assert s.prev(10) is None


def test_kth_bounds():
    s = OrderedSet([4, 1, 9], seed=5)
    assert [s.kth(k) for k in range(3)] == [1, 4, 9]
    assert s.kth(3) is None
    assert s.kth(-1) is None
    assert OrderedSet().kth(0) is None


def test_ordered_set_matches_sorted_model():
    rng = random.Random(42)
    s = OrderedSet(seed=6)
    model: set[int] = set()
    for _ in range(500):
        value = rng.randint(-50, 50)
        if rng.random() < 0.6:
            s.insert(value)
            model.add(value)
        else:
            s.delete(value)
            model.discard(value)
        assert len(s) == len(model)
    ordered = sorted(model)
    assert list(s) == ordered
    for k, value in enumerate(ordered):
        assert s.kth(k) == value
    for probe in range(-55, 56):
        assert (probe in s) == (probe in model)
        above = [v for v in ordered if v > probe]
        below = [v for v in ordered if v < probe]
        assert s.next(probe) == (above[0] if above else None)
        assert s.prev(probe) == (below[-1] if below else None)


def test_implicit_treap_insert_positions():
    t = ImplicitTreap(seed=7)
    t.insert(0, 5)
    t.insert(0, 3)
    t.insert(2, 8)
    t.insert(1, 4)
    assert list(t) == [3, 4, 5, 8]
    assert len(t) == 4


def test_implicit_treap_reverse_and_min():
    t = ImplicitTreap([1, 2, 3, 4, 5], seed=8)
    t.reverse(1, 3)
    assert list(t) == [1, 4, 3, 2, 5]
    assert t.min(1, 2) == 3
    assert t.min(0, 4) == 1
    t.reverse(0, 4)
    assert list(t) == [5, 2, 3, 4, 1]
    assert t.min(0, 1) == 2


def test_implicit_treap_errors():
    t = ImplicitTreap([1, 2, 3], seed=9)
    with pytest.raises(IndexError):
        t.insert(5, 0)
    with pytest.raises(IndexError):
        t.min(0, 3)
    with pytest.raises(ValueError):
        t.reverse(2, 1)
    with pytest.raises(IndexError):
        t.reverse(-1, 1)


def test_implicit_treap_against_list_model():
    rng = random.Random(99)
    model = [rng.randint(-100, 100) for _ in range(60)]
    t = ImplicitTreap(model, seed=10)
    for _ in range(300):
        left = rng.randrange(len(model))
        right = rng.randrange(left, len(model))
        action = rng.random()
        if action < 0.4:
            t.reverse(left, right)
            model[left:right + 1] = model[left:right + 1][::-1]
        elif action < 0.8:
            assert t.min(left, right) == min(model[left:right + 1])
        else:
            value = rng.randint(-100, 100)
            index = rng.randint(0, len(model))
            t.insert(index, value)
            model.insert(index, value)
    assert list(t) == model
    assert len(t) == len(model)