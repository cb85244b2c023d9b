"""Segment trees for range maximum with count, 2D range minimum and brackets.

Positions are numbered from zero and ranges include both ends.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


def _power_of_two(n: int) -> int:
    size = 1
    while size < n:
        size *= 2
    return size


def _check_range(left: int, right: int, size: int) -> None:
    if left > right:
        raise ValueError(f"left end {left} is after right end {right}")
    if left < 0 or right >= size:
        raise IndexError(f"range [{left}, {right}] outside 0..{size - 1}")


_Best = tuple[int, int] | None


def _merge_best(first: _Best, second: _Best) -> _Best:
    if first is None:
        return second
    if second is None:
        return first
    if first[0] > second[0]:
        return first
    if first[0] < second[0]:
        return second
    return first[0], first[1] + second[1]


class MaxCountTree:
    """Answers queries for the maximum of a range and how often it occurs."""

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        self._count = len(values)
        self._size = _power_of_two(len(values))
        tree: list[_Best] = [None] * (2 * self._size)
        for index, value in enumerate(values):
            tree[self._size + index] = (value, 1)
        for node in range(self._size - 1, 0, -1):
            tree[node] = _merge_best(tree[2 * node], tree[2 * node + 1])
        self._tree = tree

    def __len__(self) -> int:
        return self._count

    def query(self, left: int, right: int) -> tuple[int, int]:
        """Return ``(maximum, occurrences)`` over positions left..right."""
        _check_range(left, right, self._count)
        result: _Best = None
        lo = left + self._size
        hi = right + self._size + 1
        while lo < hi:
            if lo & 1:
                result = _merge_best(result, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                result = _merge_best(result, self._tree[hi])
            lo //= 2
            hi //= 2
        assert result is not None
        return result


class MinTree2D:
    """Answers minimum queries over rectangles of a matrix."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        self._rows = len(matrix)
        self._cols = len(matrix[0]) if matrix else 0
        if any(len(row) != self._cols for row in matrix):
            raise ValueError("matrix rows must all have the same length")
        self._row_size = _power_of_two(self._rows)
        self._col_size = _power_of_two(self._cols)
        rsize, csize = self._row_size, self._col_size
        tree: list[list[float]] = [[math.inf] * (2 * csize) for _ in range(2 * rsize)]
        for r, row in enumerate(matrix):
            line = tree[rsize + r]
            for c, value in enumerate(row):
                line[csize + c] = value
            for c in range(csize - 1, 0, -1):
                line[c] = min(line[2 * c], line[2 * c + 1])
        for r in range(rsize - 1, 0, -1):
            upper, lower = tree[2 * r], tree[2 * r + 1]
            tree[r] = [min(a, b) for a, b in zip(upper, lower)]
        self._tree = tree

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    def _row_min(self, line: list[float], col1: int, col2: int) -> float:
        best = math.inf
        lo = col1 + self._col_size
        hi = col2 + self._col_size + 1
        while lo < hi:
            if lo & 1:
                best = min(best, line[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = min(best, line[hi])
            lo //= 2
            hi //= 2
        return best

    def query(self, row1: int, col1: int, row2: int, col2: int) -> int:
        """Minimum of the cells from (row1, col1) to (row2, col2)."""
        _check_range(row1, row2, self._rows)
        _check_range(col1, col2, self._cols)
        best = math.inf
        lo = row1 + self._row_size
        hi = row2 + self._row_size + 1
        while lo < hi:
            if lo & 1:
                best = min(best, self._row_min(self._tree[lo], col1, col2))
                lo += 1
            if hi & 1:
                hi -= 1
                best = min(best, self._row_min(self._tree[hi], col1, col2))
            lo //= 2
            hi //= 2
        return int(best)


@dataclass(frozen=True)
class _Brackets:
    open: int = 0
    closed: int = 0
    matched: int = 0

    def __add__(self, other: _Brackets) -> _Brackets:
        pairs = min(self.open, other.closed)
        return _Brackets(
            open=self.open + other.open - pairs,
            closed=self.closed + other.closed - pairs,
            matched=self.matched + other.matched + pairs,
        )


_EMPTY = _Brackets()


class BracketTree:
    """Answers queries for the longest correct bracket subsequence of a range.

    Characters other than ``(`` and ``)`` are ignored.
    """

    def __init__(self, text: str) -> None:
        self._count = len(text)
        self._size = _power_of_two(len(text))
        tree = [_EMPTY] * (2 * self._size)
        for index, char in enumerate(text):
            if char == "(":
                tree[self._size + index] = _Brackets(open=1)
            elif char == ")":
                tree[self._size + index] = _Brackets(closed=1)
        for node in range(self._size - 1, 0, -1):
            tree[node] = tree[2 * node] + tree[2 * node + 1]
        self._tree = tree

    def __len__(self) -> int:
        return self._count

    def query(self, left: int, right: int) -> int:
        """Length of the longest correct bracket subsequence in left..right."""
        _check_range(left, right, self._count)
        head = _EMPTY
        tail = _EMPTY
        lo = left + self._size
        hi = right + self._size + 1
        while lo < hi:
            if lo & 1:
                head = head + self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                tail = self._tree[hi] + tail
            lo //= 2
            hi //= 2
        return 2 * (head + tail).matched