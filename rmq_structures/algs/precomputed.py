"""<O(n^2), O(1)> RMQ that precomputes the answer for every pair (i, j)."""

from __future__ import annotations

from typing import Iterable, List

from rmq_structures.algs.tables import choose_min, freeze_elements

__all__ = ["PrecomputedRMQ"]


class PrecomputedRMQ:
    """Brute-force table, kept as the simplest correct baseline.

    Quadratic space: only sensible for small arrays.
    """

    def __init__(self, elements: Iterable[float]):
        self.elements = freeze_elements(elements)
        n = len(self.elements)
        values = self.elements
        # Upper triangle only: table[i][j - i] holds the answer for (i, j).
        table: List[List[int]] = [[i] * (n - i) for i in range(n)]
        # Fill by diagonals of increasing interval length.
        for length in range(1, n):
            for i in range(n - length):
                j = i + length
                table[i][length] = choose_min(values, table[i][length - 1], j)
        self._table = table

    def __len__(self) -> int:
        return len(self.elements)

    def rmq(self, i: int, j: int) -> int:
        return self._table[i][j - i]
