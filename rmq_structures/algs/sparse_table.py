"""<O(n log n), O(1)> RMQ backed by a sparse table over the whole array."""

from __future__ import annotations

from typing import Iterable

from rmq_structures.algs.tables import (
    build_sparse_table,
    compute_logs,
    compute_powers,
    freeze_elements,
    sparse_table_min,
)

__all__ = ["SparseTableRMQ"]


class SparseTableRMQ:
    """Sparse table with ``table[start][level]`` = argmin of a 2**level window.

    Ties resolve to the leftmost index of the range.
    """

    def __init__(self, elements: Iterable[float]):
        self.elements = freeze_elements(elements)
        n = len(self.elements)
        self._logs = compute_logs(n)
        self._powers = compute_powers(n)
        self._table = build_sparse_table(self.elements, range(n), self._powers)

    def __len__(self) -> int:
        return len(self.elements)

    def rmq(self, i: int, j: int) -> int:
        if i == j:
            return i
        return sparse_table_min(self.elements, self._table, self._logs, self._powers, i, j)
