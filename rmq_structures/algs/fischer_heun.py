"""
<O(n), O(1)> Fischer-Heun RMQ.

Layout
------
* The array is cut into blocks of ``b = floor(log2(n) / 4)`` elements; the
  last block may be shorter.
* Top layer: the argmin of each block, indexed by a sparse table, answers
  the run of whole blocks strictly inside a query.
* Bottom layer: every block is summarised by its Cartesian number, an
  integer that depends only on the relative order of the block's elements.
  One full ``[k][l]`` table is built per distinct number and shared by
  every block of that shape, so there are at most ``4**b`` tables.

For ``b < 1`` (n < 16) no layers are built and queries scan the range.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from rmq_structures.algs.tables import (
    block_minima,
    build_sparse_table,
    choose_min,
    compute_logs,
    compute_powers,
    freeze_elements,
    linear_min,
    log,
    sparse_table_min,
)

__all__ = [
    "FischerHeunRMQ",
    "cartesian_number",
    "build_block_table",
    "fischer_heun_block_size",
]


def fischer_heun_block_size(n: int) -> int:
    """floor(log2(n) / 4); 0 for n < 16."""
    if n < 1:
        return 0
    return (n.bit_length() - 1) // 4


def cartesian_number(values: Sequence[float], start: int, stop: int) -> int:
    """Encode the Cartesian-tree shape of ``values[start:stop]`` as an integer.

    A left-to-right sweep over a monotonic stack: every push appends a 1 bit,
    every pop a 0 bit. An element only pops entries strictly greater than
    itself, so equal elements keep the earlier one as the ancestor, matching
    the leftmost tie-break of :func:`build_block_table`.
    """
    stack: List[int] = [start]
    number = 1
    for k in range(start + 1, stop):
        while stack and values[k] < values[stack[-1]]:
            stack.pop()
            number <<= 1
        stack.append(k)
        number = (number << 1) | 1
    # Drain the stack; each pop appends a 0 bit.
    number <<= len(stack)
    return number


def build_block_table(values: Sequence[float], start: int, stop: int) -> List[List[int]]:
    """All-pairs argmin table for ``values[start:stop]``, as block offsets.

    ``table[k][l]`` is the offset of the leftmost minimum over offsets
    ``k..l``; entries with ``l < k`` are unused.
    """
    size = stop - start
    table: List[List[int]] = [[0] * size for _ in range(size)]
    for k in range(size):
        table[k][k] = k
    for k in range(size):
        row = table[k]
        for l in range(k + 1, size):
            prev = row[l - 1]
            row[l] = prev if values[start + prev] <= values[start + l] else l
    return table


class FischerHeunRMQ:
    """Two-level block index with Cartesian-number deduplication."""

    def __init__(
        self,
        elements: Iterable[float],
        *,
        debug: Optional[Dict[str, object]] = None,
    ):
        self.elements = freeze_elements(elements)
        n = len(self.elements)
        self.block_size = fischer_heun_block_size(n)
        self._top: List[int] = []
        self._table: List[List[int]] = []
        self._logs: List[int] = []
        self._powers: List[int] = []
        self._block_shapes: List[int] = []
        self._shape_tables: Dict[int, List[List[int]]] = {}

        if self.block_size >= 1:
            self._build_top()
            self._build_bottom()
            log(
                f"FischerHeunRMQ: n={n} b={self.block_size} "
                f"blocks={len(self._top)} shapes={len(self._shape_tables)}"
            )

        if debug is not None:
            debug["n"] = n
            debug["block_size"] = self.block_size
            debug["block_count"] = len(self._top)
            debug["fallback_linear"] = self.block_size < 1
            debug["distinct_shapes"] = len(self._shape_tables)
            debug["table_cells"] = sum(len(t) * len(t) for t in self._shape_tables.values())

    # ------------------------------------------------------------------ #
    #  Construction                                                      #
    # ------------------------------------------------------------------ #
    def _build_top(self) -> None:
        self._top = block_minima(self.elements, self.block_size)
        m = len(self._top)
        self._logs = compute_logs(m)
        self._powers = compute_powers(m)
        self._table = build_sparse_table(self.elements, self._top, self._powers)

    def _build_bottom(self) -> None:
        n = len(self.elements)
        b = self.block_size
        for start in range(0, n, b):
            stop = min(start + b, n)
            shape = cartesian_number(self.elements, start, stop)
            self._block_shapes.append(shape)
            if shape not in self._shape_tables:
                self._shape_tables[shape] = build_block_table(self.elements, start, stop)

    # ------------------------------------------------------------------ #
    #  Queries                                                           #
    # ------------------------------------------------------------------ #
    def __len__(self) -> int:
        return len(self.elements)

    @property
    def shape_count(self) -> int:
        """Number of distinct block shapes (and thus bottom-layer tables)."""
        return len(self._shape_tables)

    def block_shape(self, block: int) -> int:
        return self._block_shapes[block]

    def _in_block(self, block: int, k: int, l: int) -> int:
        table = self._shape_tables[self._block_shapes[block]]
        return block * self.block_size + table[k][l]

    def _boundary_min(self, i: int, j: int) -> int:
        b = self.block_size
        i_block = i // b
        j_block = j // b
        if i_block == j_block:
            return self._in_block(i_block, i % b, j % b)
        first = self._in_block(i_block, i % b, b - 1)
        second = self._in_block(j_block, 0, j % b)
        return choose_min(self.elements, first, second)

    def rmq(self, i: int, j: int) -> int:
        if self.block_size < 1:
            return linear_min(self.elements, i, j)
        boundary = self._boundary_min(i, j)
        top_i = i // self.block_size + 1
        top_j = j // self.block_size - 1
        if top_j < top_i:
            return boundary
        interior = sparse_table_min(
            self.elements, self._table, self._logs, self._powers, top_i, top_j
        )
        return choose_min(self.elements, boundary, interior)
