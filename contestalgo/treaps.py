"""Treaps: an ordered set with rank queries and a sequence with range reversal.

Positions and ranks are numbered from zero and ranges include both ends.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class _KeyNode:
    key: int
    priority: float
    size: int = 1
    left: _KeyNode | None = None
    right: _KeyNode | None = None


def _key_size(node: _KeyNode | None) -> int:
    return node.size if node is not None else 0


def _key_update(node: _KeyNode) -> None:
    node.size = 1 + _key_size(node.left) + _key_size(node.right)


def _key_split(
    node: _KeyNode | None, key: int
) -> tuple[_KeyNode | None, _KeyNode | None]:
    """Split into keys below ``key`` and keys at least ``key``."""
    if node is None:
        return None, None
    if node.key < key:
        lower, upper = _key_split(node.right, key)
        node.right = lower
        _key_update(node)
        return node, upper
    lower, upper = _key_split(node.left, key)
    node.left = upper
    _key_update(node)
    return lower, node


def _key_merge(first: _KeyNode | None, second: _KeyNode | None) -> _KeyNode | None:
    """Join two treaps where every key of first is below every key of second."""
    if first is None:
        return second
    if second is None:
        return first
    if first.priority > second.priority:
        second.left = _key_merge(first, second.left)
        _key_update(second)
        return second
    first.right = _key_merge(first.right, second)
    _key_update(first)
    return first


class OrderedSet:
    """A set of integers supporting successor, predecessor and k-th queries."""

    def __init__(self, values: Iterable[int] = (), *, seed: int | None = None) -> None:
        self._root: _KeyNode | None = None
        self._random = random.Random(seed)
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return _key_size(self._root)

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.key == value:
                return True
            node = node.right if value > node.key else node.left  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[int]:
        stack: list[_KeyNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def insert(self, value: int) -> None:
        """Add value; a value already present is left alone."""
        if value in self:
            return
        lower, upper = _key_split(self._root, value)
        node = _KeyNode(value, self._random.random())
        self._root = _key_merge(_key_merge(lower, node), upper)

    def delete(self, value: int) -> None:
        """Remove value if it is present."""
        if value not in self:
            return
        lower, rest = _key_split(self._root, value)
        _, upper = _key_split(rest, value + 1)
        self._root = _key_merge(lower, upper)

    def next(self, value: int) -> int | None:
        """Smallest element greater than value, or None."""
        best = None
        node = self._root
        while node is not None:
            if node.key > value:
                best = node.key
                node = node.left
            else:
                node = node.right
        return best

    def prev(self, value: int) -> int | None:
        """Largest element less than value, or None."""
        best = None
        node = self._root
        while node is not None:
            if node.key < value:
                best = node.key
                node = node.right
            else:
                node = node.left
        return best

    def kth(self, k: int) -> int | None:
        """The element of rank k (the k-th smallest from zero), or None."""
        if k < 0 or k >= len(self):
            return None
        node = self._root
        while node is not None:
            left_size = _key_size(node.left)
            if k < left_size:
                node = node.left
            elif k == left_size:
                return node.key
            else:
                k -= left_size + 1
                node = node.right
        return None


@dataclass(slots=True, eq=False)
class _SeqNode:
    value: int
    priority: float
    size: int = 1
    minimum: int = 0
    flipped: bool = False
    left: _SeqNode | None = None
    right: _SeqNode | None = None


def _seq_size(node: _SeqNode | None) -> int:
    return node.size if node is not None else 0


def _seq_push(node: _SeqNode) -> None:
    if node.flipped:
        node.flipped = False
        node.left, node.right = node.right, node.left
        if node.left is not None:
            node.left.flipped = not node.left.flipped
        if node.right is not None:
            node.right.flipped = not node.right.flipped


def _seq_update(node: _SeqNode) -> None:
    node.size = 1 + _seq_size(node.left) + _seq_size(node.right)
    minimum = node.value
    if node.left is not None:
        minimum = min(minimum, node.left.minimum)
    if node.right is not None:
        minimum = min(minimum, node.right.minimum)
    node.minimum = minimum


def _seq_split(
    node: _SeqNode | None, count: int
) -> tuple[_SeqNode | None, _SeqNode | None]:
    """Split off the first ``count`` elements."""
    if node is None:
        return None, None
    _seq_push(node)
    left_size = _seq_size(node.left)
    if left_size < count:
        head, tail = _seq_split(node.right, count - left_size - 1)
        node.right = head
        _seq_update(node)
        return node, tail
    head, tail = _seq_split(node.left, count)
    node.left = tail
    _seq_update(node)
    return head, node


def _seq_merge(first: _SeqNode | None, second: _SeqNode | None) -> _SeqNode | None:
    if first is None:
        return second
    if second is None:
        return first
    if first.priority > second.priority:
        _seq_push(second)
        second.left = _seq_merge(first, second.left)
        _seq_update(second)
        return second
    _seq_push(first)
    first.right = _seq_merge(first.right, second)
    _seq_update(first)
    return first


class ImplicitTreap:
    """A sequence of integers with insertion, range reversal and range minimum."""

    def __init__(self, values: Iterable[int] = (), *, seed: int | None = None) -> None:
        self._root: _SeqNode | None = None
        self._random = random.Random(seed)
        for value in values:
            self.insert(len(self), value)

    def __len__(self) -> int:
        return _seq_size(self._root)

    def __iter__(self) -> Iterator[int]:
        stack: list[_SeqNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                _seq_push(node)
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def _check_range(self, left: int, right: int) -> None:
        if left > right:
            raise ValueError(f"left end {left} is after right end {right}")
        if left < 0 or right >= len(self):
            raise IndexError(f"range [{left}, {right}] outside 0..{len(self) - 1}")

    def insert(self, index: int, value: int) -> None:
        """Insert value so that it ends up at position index."""
        if not 0 <= index <= len(self):
            raise IndexError(f"insert position {index} outside 0..{len(self)}")
        head, tail = _seq_split(self._root, index)
        node = _SeqNode(value, self._random.random(), minimum=value)
        self._root = _seq_merge(_seq_merge(head, node), tail)

    def reverse(self, left: int, right: int) -> None:
        """Reverse the order of the elements at positions left..right."""
        self._check_range(left, right)
        head, rest = _seq_split(self._root, left)
        middle, tail = _seq_split(rest, right - left + 1)
        assert middle is not None
        middle.flipped = not middle.flipped
        self._root = _seq_merge(_seq_merge(head, middle), tail)

    def min(self, left: int, right: int) -> int:
        """Smallest element at positions left..right."""
        self._check_range(left, right)
        head, rest = _seq_split(self._root, left)
        middle, tail = _seq_split(rest, right - left + 1)
        assert middle is not None
        result = middle.minimum
        self._root = _seq_merge(head, _seq_merge(middle, tail))
        return result