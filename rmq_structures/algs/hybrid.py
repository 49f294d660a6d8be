"""
<O(n), O(log n)> hybrid RMQ.

The array is cut into blocks of ``floor(log2 n)`` elements. A sparse table
over the per-block minima answers the whole blocks inside a query; the
partial blocks at either end are scanned directly.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from rmq_structures.algs.tables import (
    block_minima,
    build_sparse_table,
    choose_min,
    compute_logs,
    compute_powers,
    freeze_elements,
    log,
    sparse_table_min,
)

__all__ = ["HybridRMQ", "hybrid_block_size"]


def hybrid_block_size(n: int) -> int:
    """floor(log2 n), or 0 when there is nothing to split."""
    if n <= 1:
        return 0
    return n.bit_length() - 1


class HybridRMQ:
    """Sparse table over block minima on top, linear scans at the boundaries."""

    def __init__(
        self,
        elements: Iterable[float],
        *,
        debug: Optional[Dict[str, object]] = None,
    ):
        self.elements = freeze_elements(elements)
        n = len(self.elements)
        self.block_size = hybrid_block_size(n)
        self._top: List[int] = []
        self._table: List[List[int]] = []
        self._logs: List[int] = []
        self._powers: List[int] = []

        # A single element (or none) never needs the layers.
        if n > 1:
            self._top = block_minima(self.elements, self.block_size)
            m = len(self._top)
            self._logs = compute_logs(m)
            self._powers = compute_powers(m)
            self._table = build_sparse_table(self.elements, self._top, self._powers)
            log(f"HybridRMQ: n={n} b={self.block_size} blocks={m}")

        if debug is not None:
            debug["n"] = n
            debug["block_size"] = self.block_size
            debug["block_count"] = len(self._top)

    def __len__(self) -> int:
        return len(self.elements)

    def _boundary_min(self, i: int, j: int) -> int:
        values = self.elements
        b = self.block_size
        best = i
        one_past_first_block = (i // b) * b + b
        for k in range(i, min(one_past_first_block, j + 1)):
            best = choose_min(values, best, k)
        start_of_last_block = (j // b) * b
        for k in range(max(start_of_last_block, i), j + 1):
            best = choose_min(values, best, k)
        return best

    def rmq(self, i: int, j: int) -> int:
        if len(self.elements) <= 1:
            return i
        b = self.block_size
        boundary = self._boundary_min(i, j)
        top_i = i // b + 1
        top_j = j // b - 1
        if top_j < top_i:
            return boundary
        interior = sparse_table_min(
            self.elements, self._table, self._logs, self._powers, top_i, top_j
        )
        return choose_min(self.elements, boundary, interior)
