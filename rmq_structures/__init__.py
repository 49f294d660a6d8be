# Structures
from .algs import (
    RMQ,
    PrecomputedRMQ,
    SparseTableRMQ,
    HybridRMQ,
    FischerHeunRMQ,
    cartesian_number,
    build_block_table,
)

# Shared primitives & configuration
from .algs.tables import choose_min, compute_logs, compute_powers
from .common.constants import DEFAULT_SEED, RNG_SEEDS, seed_everywhere

# Name-based construction
from .registry import RMQ_FACTORIES, available_structures, create_rmq

__all__ = [
    # structures
    "RMQ",
    "PrecomputedRMQ",
    "SparseTableRMQ",
    "HybridRMQ",
    "FischerHeunRMQ",
    "cartesian_number",
    "build_block_table",
    # primitives
    "choose_min",
    "compute_logs",
    "compute_powers",
    # configuration
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
    # registry
    "RMQ_FACTORIES",
    "available_structures",
    "create_rmq",
]
