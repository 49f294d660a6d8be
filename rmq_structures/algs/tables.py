"""
Shared primitives for the RMQ structures: the tie-break rule, log/power
tables and the sparse table.

Everything here is a free function over plain lists so that every index
instance owns its own tables and nothing is shared between instances.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

# Global debug switch. log() reads it from this module at call time, so set
# rmq_structures.algs.tables.VERBOSE; a re-exported copy would not reach it.
VERBOSE: bool = False


def log(*args, **kwargs) -> None:  # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)


# --------------------------------------------------------------------------- #
#  Input handling                                                             #
# --------------------------------------------------------------------------- #
def freeze_elements(elements: Iterable[float] | np.ndarray) -> Tuple[float, ...]:
    """Return an immutable copy of ``elements`` holding native scalars."""
    if isinstance(elements, np.ndarray):
        if elements.ndim != 1:
            raise ValueError(
                f"elements must be one-dimensional, got array of shape {elements.shape}"
            )
        frozen = tuple(elements.tolist())
    else:
        frozen = tuple(elements)
    for idx, value in enumerate(frozen):
        # NaN is the only value unequal to itself, whatever its type.
        if value != value:
            raise ValueError(f"element #{idx} is NaN; elements must be totally ordered")
    return frozen


# --------------------------------------------------------------------------- #
#  Tie-break                                                                  #
# --------------------------------------------------------------------------- #
def choose_min(values: Sequence[float], a: int, b: int) -> int:
    """Return the index holding the smaller value, preferring ``a`` on ties."""
    return a if values[a] <= values[b] else b


def linear_min(values: Sequence[float], i: int, j: int) -> int:
    """Leftmost argmin of ``values[i..j]`` by a single scan."""
    best = i
    for k in range(i + 1, j + 1):
        best = choose_min(values, best, k)
    return best


# --------------------------------------------------------------------------- #
#  Log / power tables                                                         #
# --------------------------------------------------------------------------- #
def compute_logs(n: int) -> List[int]:
    """logs[i] is the largest k with 2**k <= i + 1, for i in [0, n)."""
    logs = [0] * n
    k = 0
    two_to_k = 1
    for i in range(n):
        if two_to_k * 2 <= i + 1:
            k += 1
            two_to_k *= 2
        logs[i] = k
    return logs


def compute_powers(n: int) -> List[int]:
    """Ascending powers of two up to and including the largest one <= n."""
    powers: List[int] = []
    power = 1
    while power <= n:
        powers.append(power)
        power *= 2
    return powers


# --------------------------------------------------------------------------- #
#  Sparse table                                                               #
# --------------------------------------------------------------------------- #
def build_sparse_table(
    values: Sequence[float],
    base: Sequence[int],
    powers: Sequence[int],
) -> List[List[int]]:
    """Build ``table[start][level]`` over the positions of ``base``.

    ``base[start]`` is the element index standing for position ``start``
    (the identity for a plain sparse table, a block minimum for a top layer).
    Row ``start`` holds every level whose window ``[start, start + 2**level)``
    fits inside ``base``, so rows shrink towards the end of the table.
    """
    m = len(base)
    table: List[List[int]] = [[idx] for idx in base]
    level = 1
    while level < len(powers) and powers[level] <= m:
        half = powers[level - 1]
        for start in range(m - powers[level] + 1):
            left = table[start][level - 1]
            right = table[start + half][level - 1]
            table[start].append(choose_min(values, left, right))
        level += 1
    return table


def sparse_table_min(
    values: Sequence[float],
    table: Sequence[Sequence[int]],
    logs: Sequence[int],
    powers: Sequence[int],
    lo: int,
    hi: int,
) -> int:
    """Element index of the minimum over table positions ``lo..hi`` (inclusive).

    Two windows of length ``2**k`` cover the range from both ends; they may
    overlap, which is harmless for a minimum.
    """
    k = logs[hi - lo]
    two_to_k = powers[k]
    return choose_min(values, table[lo][k], table[hi - two_to_k + 1][k])


def block_minima(values: Sequence[float], block_size: int) -> List[int]:
    """Leftmost argmin of each consecutive block of ``block_size`` elements."""
    n = len(values)
    top: List[int] = []
    for start in range(0, n, block_size):
        top.append(linear_min(values, start, min(start + block_size, n) - 1))
    return top


__all__ = [
    "VERBOSE",
    "log",
    "freeze_elements",
    "choose_min",
    "linear_min",
    "compute_logs",
    "compute_powers",
    "build_sparse_table",
    "sparse_table_min",
    "block_minima",
]
