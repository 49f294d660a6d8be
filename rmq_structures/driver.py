"""
Differential test harness for the RMQ structures.

Builds a candidate and a trusted reference over the same random arrays,
fires random ``(i, j)`` probes at both and requires the candidate's answer
to point at an element equal to the reference's. Any minimal index is
accepted, so ties never count as mismatches.

Usage::

    rmq-driver hybrid 42
    python -m rmq_structures.driver FischerHeunRMQ --skip-large
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from rmq_structures.algs.base import RMQ
from rmq_structures.common.constants import (
    DEFAULT_REFERENCE,
    DEFAULT_SEED,
    LARGE_ARRAY_SIZES,
    MAX_SMALL_ARRAY_SIZE,
    NUM_TRIALS_PER_LARGE_SIZE,
    NUM_TRIALS_PER_SMALL_SIZE,
    PROBES_PER_ELEMENT,
)
from rmq_structures.registry import available_structures, create_rmq, resolve_name

__all__ = [
    "random_array",
    "check_rmq",
    "run_trials",
    "run_small_tests",
    "run_large_tests",
    "timing_summary",
    "main",
]


def random_array(rng: random.Random, size: int) -> List[float]:
    return [rng.random() for _ in range(size)]


def check_rmq(
    candidate: RMQ,
    reference: RMQ,
    elements: Sequence[float],
    rng: random.Random,
    num_probes: int,
) -> None:
    """Probe both structures ``num_probes`` times; raise on the first mismatch."""
    n = len(elements)
    if n == 0:
        return
    for _ in range(num_probes):
        i = rng.randrange(n)
        j = i + rng.randrange(n - i)
        ours = reference.rmq(i, j)
        theirs = candidate.rmq(i, j)
        if not (0 <= theirs < n):
            raise AssertionError(
                f"RMQ({i}, {j}) on array of length {n} returned {theirs}"
            )
        if elements[theirs] != elements[ours]:
            raise AssertionError(
                f"RMQ({i}, {j}) on array of length {n} returned {theirs} "
                f"(value {elements[theirs]!r}), expected value {elements[ours]!r}"
            )


def _start_test(message: str) -> None:
    print(f"================ {message} ================")


def run_trials(
    candidate_name: str,
    reference_name: str,
    sizes: Iterable[int],
    trials: int,
    rng: random.Random,
    *,
    verbose: bool = True,
    build_times: Optional[List[float]] = None,
) -> None:
    for size in sizes:
        if verbose:
            print(f"Testing size {size}")
        for _ in range(trials):
            elements = random_array(rng, size)
            start = time.perf_counter()
            candidate = create_rmq(candidate_name, list(elements))
            elapsed = time.perf_counter() - start
            reference = create_rmq(reference_name, elements)
            if build_times is not None:
                build_times.append(elapsed)
            check_rmq(candidate, reference, elements, rng, PROBES_PER_ELEMENT * size)


def run_small_tests(
    candidate_name: str,
    reference_name: str,
    rng: random.Random,
    *,
    max_size: int = MAX_SMALL_ARRAY_SIZE,
    trials: int = NUM_TRIALS_PER_SMALL_SIZE,
    verbose: bool = True,
    build_times: Optional[List[float]] = None,
) -> None:
    _start_test("Small Array Tests")
    run_trials(
        candidate_name,
        reference_name,
        range(max_size),
        trials,
        rng,
        verbose=verbose,
        build_times=build_times,
    )


def run_large_tests(
    candidate_name: str,
    reference_name: str,
    rng: random.Random,
    *,
    sizes: Sequence[int] = LARGE_ARRAY_SIZES,
    trials: int = NUM_TRIALS_PER_LARGE_SIZE,
    verbose: bool = True,
    build_times: Optional[List[float]] = None,
) -> None:
    _start_test("Large Array Tests")
    run_trials(
        candidate_name,
        reference_name,
        sizes,
        trials,
        rng,
        verbose=verbose,
        build_times=build_times,
    )


def timing_summary(durations: Sequence[float]) -> Dict[str, float]:
    if not durations:
        return {"count": 0}
    arr = np.array(durations, dtype=float)
    return {
        "count": float(arr.size),
        "mean": float(arr.mean()),
        "p50": float(np.percentile(arr, 50)),
        "p95": float(np.percentile(arr, 95)),
        "max": float(arr.max()),
    }


def _format_summary(label: str, summary: Dict[str, float]) -> str:
    if not summary.get("count"):
        return f"{label}: no builds"
    return (
        f"{label}: builds={int(summary['count'])},mean={summary['mean']:.6f},"
        f"p50={summary['p50']:.6f},p95={summary['p95']:.6f},max={summary['max']:.6f}"
    )


def _parse_sizes(value: str) -> List[int]:
    sizes = [int(p) for p in value.split(",") if p.strip()]
    if any(size < 0 for size in sizes):
        raise argparse.ArgumentTypeError("array sizes must be non-negative")
    return sizes


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Cross-check an RMQ structure against a reference on random arrays."
    )
    parser.add_argument(
        "structure",
        help=f"Structure under test: one of {', '.join(available_structures())} (class names accepted).",
    )
    parser.add_argument(
        "seed", nargs="?", type=int, default=DEFAULT_SEED, help="Deterministic RNG seed."
    )
    parser.add_argument(
        "--reference", default=DEFAULT_REFERENCE, help="Trusted structure to compare against."
    )
    parser.add_argument(
        "--max-small-size",
        type=int,
        default=MAX_SMALL_ARRAY_SIZE,
        help="Small tests cover every size in [0, max-small-size).",
    )
    parser.add_argument(
        "--small-trials", type=int, default=NUM_TRIALS_PER_SMALL_SIZE, help="Arrays per small size."
    )
    parser.add_argument(
        "--large-sizes",
        type=_parse_sizes,
        default=list(LARGE_ARRAY_SIZES),
        help="Comma-separated array sizes for the large tests.",
    )
    parser.add_argument(
        "--large-trials", type=int, default=NUM_TRIALS_PER_LARGE_SIZE, help="Arrays per large size."
    )
    parser.add_argument("--skip-large", action="store_true", help="Only run the small tests.")
    parser.add_argument("--quiet", action="store_true", help="Do not print per-size progress.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        candidate_name = resolve_name(args.structure)
        reference_name = resolve_name(args.reference)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    rng = random.Random(args.seed)
    verbose = not args.quiet
    small_times: List[float] = []
    large_times: List[float] = []
    try:
        run_small_tests(
            candidate_name,
            reference_name,
            rng,
            max_size=args.max_small_size,
            trials=args.small_trials,
            verbose=verbose,
            build_times=small_times,
        )
        if not args.skip_large:
            run_large_tests(
                candidate_name,
                reference_name,
                rng,
                sizes=args.large_sizes,
                trials=args.large_trials,
                verbose=verbose,
                build_times=large_times,
            )
    except AssertionError as exc:
        print(f"FAILED: {exc}", file=sys.stderr)
        return 1

    print(_format_summary("small", timing_summary(small_times)))
    if not args.skip_large:
        print(_format_summary("large", timing_summary(large_times)))
    print("All tests completed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
