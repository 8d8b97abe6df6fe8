# lfsr_graph.py
"""
LFSR-driven random graph generator.

Output format:
    - A lazy stream of EdgeRecord(i, j, bit), one per unordered pair i < j.
    - Pairs are enumerated with i ascending (outer) and j ascending from
      i + 1 (inner); vertices are labeled 0, 1, ..., n-1.
    - bit == 1 means the pair is joined by an edge.

The edge probability is probability_level / 16. For every pair the low
nibble of the current LFSR state is compared against the level, then the
LFSR is stepped once. Level 15 therefore means 15/16, never "always".
"""

from typing import NamedTuple

from errors import InvalidProbabilityLevel, InvalidVertexCount
from lfsr import DEFAULT_SEED, SAMPLE_MASK, LfsrStream


MIN_PROBABILITY_LEVEL = 1
MAX_PROBABILITY_LEVEL = 15
LEVEL_DENOMINATOR = SAMPLE_MASK + 1


class EdgeRecord(NamedTuple):
    i: int
    j: int
    bit: int


def validate_probability_level(level: int) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidProbabilityLevel(f"probability level must be an integer, got {level!r}")
    if not (MIN_PROBABILITY_LEVEL <= level <= MAX_PROBABILITY_LEVEL):
        raise InvalidProbabilityLevel(
            f"probability level must be between {MIN_PROBABILITY_LEVEL} and "
            f"{MAX_PROBABILITY_LEVEL}, got {level}"
        )
    return level


def validate_vertex_count(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidVertexCount(f"vertex count must be an integer, got {n!r}")
    if n < 0:
        raise InvalidVertexCount(f"vertex count must be non-negative, got {n}")
    return n


def num_pairs(n: int) -> int:
    return n * (n - 1) // 2 if n > 1 else 0


def edge_probability(level: int) -> float:
    return validate_probability_level(level) / LEVEL_DENOMINATOR


class EdgeSampler:
    """
    Iterator over the edge records of one generation session.

    Session state is (i, j, stream.state). Each pull emits the record for
    (i, j) using the current LFSR sample, steps the LFSR exactly once and
    moves to the next pair. The iterator is exhausted once i reaches n - 1.
    """

    def __init__(self, num_vertices: int, probability_level: int, seed: int = DEFAULT_SEED):
        self.num_vertices = validate_vertex_count(num_vertices)
        self.probability_level = validate_probability_level(probability_level)
        self.stream = LfsrStream(seed)
        self.i = 0
        self.j = 1
        self.emitted = 0

    @property
    def state(self) -> int:
        return self.stream.state

    def __len__(self) -> int:
        return num_pairs(self.num_vertices) - self.emitted

    def __iter__(self) -> "EdgeSampler":
        return self

    def __next__(self) -> EdgeRecord:
        if self.i >= self.num_vertices - 1:
            raise StopIteration

        bit = 1 if self.stream.sample() < self.probability_level else 0
        record = EdgeRecord(self.i, self.j, bit)
        self.stream.advance()
        self.emitted += 1

        self.j += 1
        if self.j >= self.num_vertices:
            self.i += 1
            self.j = self.i + 1

        return record


def generate_edge_records(
    num_vertices: int,
    probability_level: int,
    seed: int = DEFAULT_SEED,
) -> EdgeSampler:
    """
    Generate the edge-probability adjacency list of an LFSR random graph.

    Args:
        num_vertices:      Number of vertices (>= 0). 0 or 1 vertices give an
                           empty sequence.
        probability_level: Integer in [1, 15]; edge probability is level / 16.
        seed:              Non-zero 32-bit LFSR seed.

    Returns:
        Lazy iterator of exactly n * (n - 1) / 2 EdgeRecords. Arguments are
        validated immediately, not on the first pull.
    """
    return EdgeSampler(num_vertices, probability_level, seed)


def count_edges(records) -> int:
    return sum(r.bit for r in records)


if __name__ == "__main__":
    # Tiny smoke test (not analysis: just sanity-check)
    recs = list(generate_edge_records(10, 8))
    print("Generated LFSR graph with", len(recs), "pairs and", count_edges(recs), "edges.")
