import itertools

import pytest

from errors import InvalidProbabilityLevel, InvalidSeed, InvalidVertexCount
from lfsr import DEFAULT_SEED, iter_lfsr_states
from lfsr_graph import (
    EdgeRecord,
    EdgeSampler,
    count_edges,
    edge_probability,
    generate_edge_records,
    num_pairs,
)


def test_scenario_three_vertices_level_eight():
    sampler = generate_edge_records(3, 8, DEFAULT_SEED)
    states = [sampler.state]
    records = []
    for rec in sampler:
        records.append(rec)
        states.append(sampler.state)

    # samples 0x5, 0xA, 0xD against level 8
    assert records == [EdgeRecord(0, 1, 1), EdgeRecord(0, 2, 0), EdgeRecord(1, 2, 0)]
    assert states == [0xB16B00B5, 0x58B5805A, 0x2C5AC02D, 0x962D6016]


def test_default_seed_is_used():
    assert list(generate_edge_records(3, 8)) == list(generate_edge_records(3, 8, 0xB16B00B5))


@pytest.mark.parametrize("n,level,seed", [(10, 8, DEFAULT_SEED), (25, 3, 1), (7, 15, 0xFFFFFFFF)])
def test_deterministic(n, level, seed):
    assert list(generate_edge_records(n, level, seed)) == list(generate_edge_records(n, level, seed))


@pytest.mark.parametrize("n", [2, 3, 4, 10, 31])
def test_cardinality_and_pair_order(n):
    records = list(generate_edge_records(n, 8))
    assert len(records) == n * (n - 1) // 2 == num_pairs(n)
    pairs = [(r.i, r.j) for r in records]
    assert pairs == list(itertools.combinations(range(n), 2))
    assert all(r.bit in (0, 1) for r in records)


@pytest.mark.parametrize("n", [0, 1])
def test_empty_for_zero_or_one_vertex(n):
    sampler = generate_edge_records(n, 8)
    assert list(sampler) == []
    assert sampler.state == DEFAULT_SEED


def test_bits_follow_lfsr_low_nibble():
    n, level, seed = 12, 6, 0x12345678
    states = list(itertools.islice(iter_lfsr_states(seed), num_pairs(n)))
    expected = [1 if (s & 0xF) < level else 0 for s in states]
    assert [r.bit for r in generate_edge_records(n, level, seed)] == expected


def test_state_advances_once_per_record():
    sampler = generate_edge_records(6, 8, 0xCAFEBABE)
    list(sampler)
    assert sampler.stream.steps == num_pairs(6)
    assert sampler.state == list(itertools.islice(iter_lfsr_states(0xCAFEBABE), 16))[15]


@pytest.mark.parametrize("seed", [DEFAULT_SEED, 0x1, 0xABCDEF01])
def test_threshold_monotonicity(seed):
    n = 40
    counts = [count_edges(generate_edge_records(n, level, seed)) for level in range(1, 16)]
    assert counts == sorted(counts)
    runs = [[r.bit for r in generate_edge_records(n, level, seed)] for level in range(1, 16)]
    for lower, higher in zip(runs, runs[1:]):
        assert all(a <= b for a, b in zip(lower, higher))


def test_level_fifteen_is_not_always_edge():
    # 0xF is drawn somewhere in a long stream, and 15 < 15 is false
    records = list(generate_edge_records(60, 15))
    assert 0 < count_edges(records) < len(records)


def test_partial_consumption():
    sampler = generate_edge_records(100, 8)
    first = list(itertools.islice(sampler, 5))
    assert [(r.i, r.j) for r in first] == [(0, 1), (0, 2), (0, 3), (0, 4), (0, 5)]
    assert len(sampler) == num_pairs(100) - 5
    assert sampler.stream.steps == 5


def test_independent_sessions_do_not_interleave():
    a = generate_edge_records(20, 8)
    b = generate_edge_records(20, 8)
    mixed_a, mixed_b = [], []
    for ra, rb in zip(a, b):
        mixed_a.append(ra)
        mixed_b.append(rb)
    assert mixed_a == mixed_b == list(generate_edge_records(20, 8))


@pytest.mark.parametrize("level", [0, 16, -1, 100, 8.0, "8", None, True])
def test_invalid_probability_level(level):
    with pytest.raises(InvalidProbabilityLevel):
        generate_edge_records(5, level)


@pytest.mark.parametrize("n", [-1, -10, 2.5, "3", None])
def test_invalid_vertex_count(n):
    with pytest.raises(InvalidVertexCount):
        generate_edge_records(n, 8)


def test_invalid_seed_fails_at_call_time():
    with pytest.raises(InvalidSeed):
        generate_edge_records(5, 8, 0)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        EdgeSampler(5, 0)


def test_edge_probability():
    assert edge_probability(8) == 0.5
    assert edge_probability(4) == 0.25
    assert edge_probability(15) == 15 / 16
    with pytest.raises(InvalidProbabilityLevel):
        edge_probability(0)
