"""
Summary statistics for generated adjacency lists.

Works directly on a stream of EdgeRecords (as produced by
lfsr_graph.generate_edge_records or read back by adjacency_io), so no
adjacency structure is ever built: only one degree counter per vertex.
"""

from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from errors import InvalidVertexCount
from lfsr_graph import EdgeRecord, edge_probability, validate_vertex_count


# Endpoints buffered before folding into the per-vertex counters.
ENDPOINT_CHUNK = 1 << 16


# ---------------------------------------------------------------------
# Degree distribution (streamed)
# ---------------------------------------------------------------------

def degree_counts(records: Iterable[EdgeRecord], num_vertices: int) -> Tuple[int, np.ndarray]:
    """
    Degree of every vertex 0..n-1, counting only records with bit == 1.

    Returns:
        (pairs_seen, degrees) where degrees is an int array of length n.
    """
    n = validate_vertex_count(num_vertices)
    degrees = np.zeros(n, dtype=np.int64)
    endpoints: List[int] = []
    pairs_seen = 0

    for i, j, bit in records:
        pairs_seen += 1
        if not (0 <= i < n and 0 <= j < n):
            raise InvalidVertexCount(f"record ({i}, {j}) references a vertex outside 0..{n - 1}")
        if bit:
            endpoints.append(i)
            endpoints.append(j)
            if len(endpoints) >= ENDPOINT_CHUNK:
                degrees += np.bincount(endpoints, minlength=n)
                endpoints.clear()

    if endpoints:
        degrees += np.bincount(endpoints, minlength=n)
    return pairs_seen, degrees


def compute_degree_distribution(degrees: np.ndarray) -> Dict[str, object]:
    if degrees.size == 0:
        return {
            "degree_histogram": {},
            "avg_degree": 0.0,
            "min_degree": 0,
            "max_degree": 0,
            "variance": 0.0,
        }

    values, freq = np.unique(degrees, return_counts=True)
    return {
        "degree_histogram": {int(d): int(c) for d, c in zip(values, freq)},
        "avg_degree": float(degrees.mean()),
        "min_degree": int(degrees.min()),
        "max_degree": int(degrees.max()),
        "variance": float(degrees.var()),
    }


# ---------------------------------------------------------------------
# Whole-graph summary
# ---------------------------------------------------------------------

def summarize_edge_records(
    records: Iterable[EdgeRecord],
    num_vertices: int,
    probability_level: Optional[int] = None,
) -> Dict[str, object]:
    """
    Consume `records` once and report edge count, density and degrees.

    Returns:
        {
            "num_vertices": int,
            "num_pairs": int (records seen),
            "num_edges": int,
            "density": float (edges / pairs, 0.0 for no pairs),
            "expected_density": float | None (level / 16),
            "avg_degree", "min_degree", "max_degree", "variance",
            "degree_histogram": dict[degree] -> count,
        }
    """
    pairs_seen, degrees = degree_counts(records, num_vertices)
    m = int(degrees.sum()) // 2

    summary: Dict[str, object] = {
        "num_vertices": int(num_vertices),
        "num_pairs": pairs_seen,
        "num_edges": m,
        "density": (m / pairs_seen) if pairs_seen else 0.0,
        "expected_density": (
            edge_probability(probability_level) if probability_level is not None else None
        ),
    }
    summary.update(compute_degree_distribution(degrees))
    return summary


def format_summary(summary: Dict[str, object]) -> str:
    lines = [
        f"Vertices: {summary['num_vertices']}",
        f"Pairs: {summary['num_pairs']}",
        f"Edges: {summary['num_edges']}",
        f"Density: {summary['density']:.4f}",
    ]
    if summary.get("expected_density") is not None:
        lines.append(f"Expected density: {summary['expected_density']:.4f}")
    lines.append(
        f"Degree avg/min/max: {summary['avg_degree']:.2f} / "
        f"{summary['min_degree']} / {summary['max_degree']}"
    )
    lines.append(f"Degree variance: {summary['variance']:.4f}")
    return "\n".join(lines)
