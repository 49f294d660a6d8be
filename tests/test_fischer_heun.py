from __future__ import annotations

import math
from typing import Dict

import pytest
from hypothesis import given, strategies as st

from rmq_structures.algs.fischer_heun import (
    FischerHeunRMQ,
    build_block_table,
    cartesian_number,
    fischer_heun_block_size,
)
from rmq_structures.algs.precomputed import PrecomputedRMQ
from tests.test_utils import (
    all_ranges,
    check_all_ranges,
    gen_floats,
    gen_ints_with_ties,
    random_ranges,
    relabel_monotone,
    rng,
)


# ---------------------------------------------------------------------------
#  Cartesian numbers & block tables
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("values,expected", [
    ([7], 0b10),
    ([1, 2, 3], 0b111000),
    ([3, 2, 1], 0b101010),
    ([5, 1, 3], 0b101100),
    ([2, 2, 2], 0b111000),
])
def test_cartesian_number_known_shapes(values, expected) -> None:
    assert cartesian_number(values, 0, len(values)) == expected


def test_cartesian_number_order_isomorphic_blocks() -> None:
    a = [5, 1, 3]
    b = [90, 10, 40]
    assert cartesian_number(a, 0, 3) == cartesian_number(b, 0, 3)
    table_a = build_block_table(a, 0, 3)
    table_b = build_block_table(b, 0, 3)
    for k in range(3):
        for l in range(k, 3):
            assert table_a[k][l] == table_b[k][l]


def test_cartesian_number_uses_slice_bounds() -> None:
    values = [100, 5, 1, 3, -50]
    assert cartesian_number(values, 1, 4) == cartesian_number([5, 1, 3], 0, 3)


def test_cartesian_number_distinguishes_shapes() -> None:
    assert cartesian_number([1, 2], 0, 2) != cartesian_number([2, 1], 0, 2)
    # Same relative order but different length never collides.
    assert cartesian_number([1, 2], 0, 2) != cartesian_number([1, 2, 3], 0, 3)


def test_cartesian_number_bit_length() -> None:
    rnd = rng(17)
    for size in range(1, 9):
        values = gen_floats(rnd, size)
        assert cartesian_number(values, 0, size).bit_length() == 2 * size


def test_block_table_offsets_are_leftmost() -> None:
    values = [9, 4, 4, 7, 1, 1]
    table = build_block_table(values, 2, 6)
    assert table[0][0] == 0
    assert table[0][1] == 0
    assert table[0][3] == 2
    assert table[1][3] == 2
    assert table[3][3] == 3


# ---------------------------------------------------------------------------
#  Structure
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("n,expected", [(0, 0), (1, 0), (15, 0), (16, 1), (255, 1), (256, 2), (5000, 3), (65536, 4)])
def test_fischer_heun_block_size(n: int, expected: int) -> None:
    assert fischer_heun_block_size(n) == expected


def test_fischer_heun_worked_example(sample_elements) -> None:
    rmq = FischerHeunRMQ(sample_elements)
    assert rmq.block_size == 0
    assert rmq.rmq(0, 2) == 1
    assert rmq.rmq(4, 7) == 6
    assert rmq.rmq(1, 3) == 1
    assert rmq.rmq(0, 7) == 1


def test_fischer_heun_empty_input() -> None:
    debug: Dict[str, object] = {}
    rmq = FischerHeunRMQ([], debug=debug)
    assert len(rmq) == 0
    assert debug["fallback_linear"] is True
    assert debug["block_count"] == 0


@pytest.mark.parametrize("n", list(range(1, 16)))
def test_fischer_heun_small_n_matches_brute_force(n: int) -> None:
    values = gen_ints_with_ties(rng(n), n, distinct=3)
    fh = FischerHeunRMQ(values)
    brute = PrecomputedRMQ(values)
    for i, j in all_ranges(n):
        assert fh.rmq(i, j) == brute.rmq(i, j)


@pytest.mark.parametrize("n", [16, 17, 31, 100, 255, 256, 257, 600])
def test_fischer_heun_exhaustive(n: int) -> None:
    values = gen_ints_with_ties(rng(n), n, distinct=5)
    check_all_ranges(FischerHeunRMQ(values), values, all_ranges(n))


def test_fischer_heun_degenerate_ranges() -> None:
    values = gen_floats(rng(8), 300)
    rmq = FischerHeunRMQ(values)
    for i in range(len(values)):
        assert rmq.rmq(i, i) == i


def test_fischer_heun_large_random_probes() -> None:
    rnd = rng(4242)
    values = gen_floats(rnd, 5000)
    check_all_ranges(FischerHeunRMQ(values), values, random_ranges(rnd, len(values), 4000))


def test_fischer_heun_shares_tables_between_equal_shapes() -> None:
    values = [20, 10] * 128
    debug: Dict[str, object] = {}
    rmq = FischerHeunRMQ(values, debug=debug)
    assert rmq.block_size == 2
    assert debug["block_count"] == 128
    assert rmq.shape_count == 1
    assert debug["distinct_shapes"] == 1
    assert debug["table_cells"] == 4
    assert rmq.rmq(0, 255) == 1
    assert rmq.rmq(2, 6) == 3


def test_fischer_heun_shape_count_bounded() -> None:
    values = gen_floats(rng(31), 5000)
    debug: Dict[str, object] = {}
    rmq = FischerHeunRMQ(values, debug=debug)
    b = rmq.block_size
    assert b == 3
    catalan = math.comb(2 * b, b) // (b + 1)
    # Full blocks have at most Catalan(b) shapes; the short tail adds one more.
    assert rmq.shape_count <= catalan + 1
    assert rmq.shape_count <= 4**b
    assert debug["block_count"] == math.ceil(5000 / b)


def test_fischer_heun_order_isomorphic_inputs_share_shapes() -> None:
    values = gen_ints_with_ties(rng(55), 400, distinct=6)
    relabelled = relabel_monotone(values)
    a = FischerHeunRMQ(values)
    b = FischerHeunRMQ(relabelled)
    assert a.block_size == b.block_size
    for block in range(math.ceil(len(values) / a.block_size)):
        assert a.block_shape(block) == b.block_shape(block)
    for i, j in random_ranges(rng(56), len(values), 500):
        assert a.rmq(i, j) == b.rmq(i, j)


def test_fischer_heun_repeated_queries_identical() -> None:
    rnd = rng(12)
    values = gen_ints_with_ties(rnd, 1000, distinct=3)
    rmq = FischerHeunRMQ(values)
    probes = random_ranges(rnd, len(values), 300)
    assert [rmq.rmq(i, j) for i, j in probes] == [rmq.rmq(i, j) for i, j in probes]


@given(
    st.lists(st.integers(min_value=-3, max_value=3), min_size=16, max_size=300),
    st.data(),
)
def test_fischer_heun_property_minimal_value(values, data) -> None:
    rmq = FischerHeunRMQ(values)
    i = data.draw(st.integers(min_value=0, max_value=len(values) - 1))
    j = data.draw(st.integers(min_value=i, max_value=len(values) - 1))
    k = rmq.rmq(i, j)
    assert i <= k <= j
    assert values[k] == min(values[i : j + 1])
