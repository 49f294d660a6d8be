"""RMQ structures: one class per preprocessing/query trade-off."""

from __future__ import annotations

from rmq_structures.algs.base import RMQ
from rmq_structures.algs.fischer_heun import (
    FischerHeunRMQ,
    build_block_table,
    cartesian_number,
    fischer_heun_block_size,
)
from rmq_structures.algs.hybrid import HybridRMQ, hybrid_block_size
from rmq_structures.algs.precomputed import PrecomputedRMQ
from rmq_structures.algs.sparse_table import SparseTableRMQ

__all__ = [
    "RMQ",
    "PrecomputedRMQ",
    "SparseTableRMQ",
    "HybridRMQ",
    "FischerHeunRMQ",
    "cartesian_number",
    "build_block_table",
    "fischer_heun_block_size",
    "hybrid_block_size",
]
