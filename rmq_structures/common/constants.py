from __future__ import annotations

import os
import random
from typing import Dict, Tuple

import numpy as np

DEFAULT_SEED: int = 1337

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
    "bench": 4242,
    "driver": DEFAULT_SEED,
}

# Differential harness defaults.
MAX_SMALL_ARRAY_SIZE: int = 200
NUM_TRIALS_PER_SMALL_SIZE: int = 100
LARGE_ARRAY_SIZES: Tuple[int, ...] = (1000, 2000, 3000, 4000, 5000)
NUM_TRIALS_PER_LARGE_SIZE: int = 1000
PROBES_PER_ELEMENT: int = 10

DEFAULT_REFERENCE: str = "fischer_heun"


def seed_everywhere(seed: int) -> None:
    """Seed all supported RNG backends deterministically."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


__all__ = [
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "MAX_SMALL_ARRAY_SIZE",
    "NUM_TRIALS_PER_SMALL_SIZE",
    "LARGE_ARRAY_SIZES",
    "NUM_TRIALS_PER_LARGE_SIZE",
    "PROBES_PER_ELEMENT",
    "DEFAULT_REFERENCE",
    "seed_everywhere",
]
