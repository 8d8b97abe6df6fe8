#!/usr/bin/env python3
"""
graph_generator.py

Generate the adjacency list of an LFSR random graph and write it to
adjacency_list.txt (one "i, j, bit" line per vertex pair i < j).

Run with flags:
    python graph_generator.py --vertices 100 --level 4

or without them to be asked for the parameters interactively:
    python graph_generator.py
"""

import argparse
import sys
from typing import Callable, List, NamedTuple, Optional

from adjacency_io import DEFAULT_OUTPUT, save_adjacency_list
from analysis import format_summary, summarize_edge_records
from errors import LfsrGraphError
from lfsr import DEFAULT_SEED, format_uint32_bin, validate_seed
from lfsr_graph import (
    MAX_PROBABILITY_LEVEL,
    MIN_PROBABILITY_LEVEL,
    generate_edge_records,
    validate_probability_level,
    validate_vertex_count,
)


class GraphParameters(NamedTuple):
    num_vertices: int
    probability_level: int


# ===============================================================
# Interactive parameter source
# ===============================================================

LEVEL_PROMPT = (
    f"Enter edge probability level x between {MIN_PROBABILITY_LEVEL} and {MAX_PROBABILITY_LEVEL} "
    "(The edge probability will be x/16. Binary number 16 is used\n"
    "for speed purposes (bit operations)): "
)


def _ask_int(prompt: str, input_fn: Callable[[str], str]) -> Optional[int]:
    try:
        return int(input_fn(prompt).strip())
    except ValueError:
        return None


def prompt_parameters(
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[..., None] = print,
    num_vertices: Optional[int] = None,
    probability_level: Optional[int] = None,
) -> GraphParameters:
    """
    Ask for whichever of the vertex count and the probability level is not
    already given, repeating each question until the answer is valid.
    EOF on input propagates.
    """
    n = num_vertices
    while n is None:
        n = _ask_int("Enter numbers of vertices: ", input_fn)
        if n is None or n < 0:
            print_fn("Number of vertices must be a non-negative integer.")
            n = None

    level = probability_level
    while level is None:
        level = _ask_int(LEVEL_PROMPT, input_fn)
        if level is not None and not (MIN_PROBABILITY_LEVEL <= level <= MAX_PROBABILITY_LEVEL):
            level = None

    return GraphParameters(n, level)


# ===============================================================
# Command line
# ===============================================================

def _seed_arg(text: str) -> int:
    # accepts 0x.., 0b.., 0o.. and plain decimal
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed: {text!r}") from None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate an edge-probability adjacency list with a 32-bit LFSR."
    )
    parser.add_argument("-n", "--vertices", type=int, help="Number of vertices")
    parser.add_argument(
        "-p",
        "--level",
        type=int,
        help=f"Edge probability level in [{MIN_PROBABILITY_LEVEL}, {MAX_PROBABILITY_LEVEL}]; "
             "edge probability is level/16",
    )
    parser.add_argument(
        "--seed",
        type=_seed_arg,
        default=DEFAULT_SEED,
        help=f"Non-zero 32-bit LFSR seed (default {DEFAULT_SEED:#x})",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Output file, overwritten on each run (default {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print edge count, density and degree statistics after writing",
    )
    parser.add_argument(
        "--show-state",
        action="store_true",
        help="Print the seed and the final LFSR state in binary",
    )
    return parser.parse_args(argv)


def resolve_parameters(args: argparse.Namespace) -> GraphParameters:
    n = validate_vertex_count(args.vertices) if args.vertices is not None else None
    level = validate_probability_level(args.level) if args.level is not None else None
    if n is None or level is None:
        return prompt_parameters(input, print, num_vertices=n, probability_level=level)
    return GraphParameters(n, level)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        seed = validate_seed(args.seed)
        params = resolve_parameters(args)
    except LfsrGraphError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except EOFError:
        print("error: input ended before all parameters were given", file=sys.stderr)
        return 2

    sampler = generate_edge_records(params.num_vertices, params.probability_level, seed)
    lines = save_adjacency_list(sampler, args.output)
    print(f"Wrote {lines} pairs to {args.output}")

    if args.show_state:
        print(f"Seed:        {format_uint32_bin(seed)}")
        print(f"Final state: {format_uint32_bin(sampler.state)}")

    if args.summary:
        # second pass from the same seed reproduces the identical stream
        summary = summarize_edge_records(
            generate_edge_records(params.num_vertices, params.probability_level, seed),
            params.num_vertices,
            params.probability_level,
        )
        print(format_summary(summary))

    return 0


if __name__ == "__main__":
    sys.exit(main())
