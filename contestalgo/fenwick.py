"""Three-dimensional Fenwick tree for point updates and box sums.

Coordinates run from zero to ``size - 1`` on every axis and boxes include
both corners.
"""

from __future__ import annotations


class Fenwick3D:
    """A cube of integers, all zero at first, with point additions and box sums."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._tree = [[[0] * size for _ in range(size)] for _ in range(size)]

    def _check_point(self, x: int, y: int, z: int) -> None:
        for coordinate in (x, y, z):
            if not 0 <= coordinate < self.size:
                raise IndexError(f"coordinate {coordinate} outside 0..{self.size - 1}")

    def add(self, x: int, y: int, z: int, delta: int) -> None:
        """Add delta to the cell at (x, y, z)."""
        self._check_point(x, y, z)
        size = self.size
        i = x
        while i < size:
            plane = self._tree[i]
            j = y
            while j < size:
                line = plane[j]
                k = z
                while k < size:
                    line[k] += delta
                    k |= k + 1
                j |= j + 1
            i |= i + 1

    def prefix_sum(self, x: int, y: int, z: int) -> int:
        """Sum of the cells with every coordinate at most the given one.

        A negative coordinate gives an empty box and a sum of 0.
        """
        if x < 0 or y < 0 or z < 0:
            return 0
        self._check_point(x, y, z)
        total = 0
        i = x
        while i >= 0:
            plane = self._tree[i]
            j = y
            while j >= 0:
                line = plane[j]
                k = z
                while k >= 0:
                    total += line[k]
                    k = (k & (k + 1)) - 1
                j = (j & (j + 1)) - 1
            i = (i & (i + 1)) - 1
        return total

    def range_sum(self, x1: int, y1: int, z1: int, x2: int, y2: int, z2: int) -> int:
        """Sum of the cells in the box from (x1, y1, z1) to (x2, y2, z2)."""
        if x1 > x2 or y1 > y2 or z1 > z2:
            raise ValueError("the first corner must not exceed the second")
        self._check_point(x1, y1, z1)
        self._check_point(x2, y2, z2)
        s = self.prefix_sum
        xa, ya, za = x1 - 1, y1 - 1, z1 - 1
        return (
            s(x2, y2, z2)
            - s(xa, y2, z2)
            - s(x2, ya, z2)
            - s(x2, y2, za)
            + s(xa, ya, z2)
            + s(xa, y2, za)
            + s(x2, ya, za)
            - s(xa, ya, za)
        )