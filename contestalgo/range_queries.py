"""Static range queries: sums by prefix sums and GCD by a sparse table.

Positions are numbered from zero and ranges include both ends.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate
from math import gcd


def _check_range(left: int, right: int, size: int) -> None:
    if left > right:
        raise ValueError(f"left end {left} is after right end {right}")
    if left < 0 or right >= size:
        raise IndexError(f"range [{left}, {right}] outside 0..{size - 1}")


class PrefixSums:
    """Answers range sum queries in constant time."""

    def __init__(self, values: Iterable[int]) -> None:
        self._totals = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._totals) - 1

    def sum(self, left: int, right: int) -> int:
        """Sum of the values at positions left..right."""
        _check_range(left, right, len(self))
        return self._totals[right + 1] - self._totals[left]


class GcdSparseTable:
    """Answers range GCD queries in constant time after n log n preparation."""

    def __init__(self, values: Iterable[int]) -> None:
        base = list(values)
        self._levels = [base]
        width = 1
        while 2 * width <= len(base):
            previous = self._levels[-1]
            self._levels.append(
                [gcd(previous[i], previous[i + width]) for i in range(len(previous) - width)]
            )
            width *= 2

    def __len__(self) -> int:
        return len(self._levels[0])

    def query(self, left: int, right: int) -> int:
        """Greatest common divisor of the values at positions left..right."""
        _check_range(left, right, len(self))
        level = (right - left + 1).bit_length() - 1
        row = self._levels[level]
        return gcd(row[left], row[right - (1 << level) + 1])