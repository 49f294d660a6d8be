from __future__ import annotations

import argparse
import random
import time
from typing import Dict, List, Sequence, Tuple

try:
    from rmq_structures.common.constants import RNG_SEEDS
    from rmq_structures.driver import timing_summary
    from rmq_structures.registry import available_structures, create_rmq
except ImportError:  # pragma: no cover - layout fallback
    import sys
    from pathlib import Path

    REPO_ROOT = Path(__file__).resolve().parents[1]
    if str(REPO_ROOT) not in sys.path:
        sys.path.append(str(REPO_ROOT))
    from rmq_structures.common.constants import RNG_SEEDS
    from rmq_structures.driver import timing_summary
    from rmq_structures.registry import available_structures, create_rmq


# Quadratic build; skip it above this size.
PRECOMPUTED_MAX_N = 2000


def bench_structure(
    name: str,
    elements: List[float],
    probes: Sequence[Tuple[int, int]],
    repeats: int,
) -> Dict[str, Dict[str, float]]:
    build_times: List[float] = []
    query_times: List[float] = []
    structure = None
    for _ in range(repeats):
        start = time.perf_counter()
        structure = create_rmq(name, elements)
        build_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        for i, j in probes:
            structure.rmq(i, j)
        elapsed = time.perf_counter() - start
        query_times.append(elapsed / max(1, len(probes)))

    build = timing_summary(build_times)
    query = timing_summary(query_times)
    print(
        f"{name:>13s} n={len(elements)}: "
        f"build_mean={build['mean']:.6f},"
        f"build_p95={build['p95']:.6f},"
        f"query_mean={query['mean'] * 1e6:.3f}us,"
        f"query_p95={query['p95'] * 1e6:.3f}us"
    )
    return {"build": build, "query": query}


def run_benchmark(args: argparse.Namespace) -> None:
    rng = random.Random(args.seed)
    names = args.structures or available_structures()
    for n in args.sizes:
        elements = [rng.random() for _ in range(n)]
        probes = []
        for _ in range(args.probes if n else 0):
            i = rng.randrange(n)
            probes.append((i, i + rng.randrange(n - i)))
        for name in names:
            if name == "precomputed" and n > PRECOMPUTED_MAX_N:
                print(f"{name:>13s} n={n}: skipped (quadratic build)")
                continue
            bench_structure(name, elements, probes, args.repeats)


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark RMQ build and query cost.")
    parser.add_argument(
        "--sizes",
        type=lambda v: [int(p) for p in v.split(",") if p.strip()],
        default=[100, 1000, 10000, 100000],
        help="Comma-separated array sizes.",
    )
    parser.add_argument("--probes", type=int, default=10000, help="Queries per structure.")
    parser.add_argument("--repeats", type=int, default=3, help="Builds per structure and size.")
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["bench"], help="Deterministic RNG seed.")
    parser.add_argument(
        "--structures",
        nargs="*",
        choices=available_structures(),
        help="Subset of structures to benchmark (default: all).",
    )
    args = parser.parse_args()
    run_benchmark(args)


if __name__ == "__main__":
    main()
