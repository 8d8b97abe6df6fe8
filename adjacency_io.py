# adjacency_io.py
"""
Reading and writing edge-probability adjacency lists.

File format (no header, no trailer):

    i, j, bit\n

one line per EdgeRecord, decimal integers separated by ", ", in the order
the records were generated. The default file is adjacency_list.txt in the
working directory and is overwritten on every run.
"""

from typing import Iterable, Iterator, List, Optional, TextIO

from errors import AdjacencyFormatError
from lfsr_graph import EdgeRecord


DEFAULT_OUTPUT = "adjacency_list.txt"
FIELD_SEPARATOR = ", "
LINE_TERMINATOR = "\n"


# ---------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------

def format_edge_record(record) -> str:
    i, j, bit = record
    return FIELD_SEPARATOR.join((str(i), str(j), str(bit)))


def write_adjacency_list(records: Iterable[EdgeRecord], fp: TextIO) -> int:
    """
    Write records to an open text stream.

    Returns:
        int: number of lines written.
    """
    count = 0
    for record in records:
        fp.write(format_edge_record(record) + LINE_TERMINATOR)
        count += 1
    return count


def save_adjacency_list(records: Iterable[EdgeRecord], path: str = DEFAULT_OUTPUT) -> int:
    # newline="\n" keeps the line terminator identical on every platform
    with open(path, "w", encoding="ascii", newline=LINE_TERMINATOR) as f:
        return write_adjacency_list(records, f)


# ---------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------

def parse_edge_record(line: str, lineno: Optional[int] = None) -> EdgeRecord:
    """Parse one "i, j, bit" line (trailing newline allowed)."""
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(parts) != 3:
        raise AdjacencyFormatError(f"expected 3 fields, got {len(parts)}: {line!r}", lineno)

    for p in parts:
        # canonical decimal only: no sign, padding, leading zeros or underscores
        if not (p.isascii() and p.isdigit() and str(int(p)) == p):
            raise AdjacencyFormatError(f"fields must be plain decimal integers: {line!r}", lineno)
    i, j, bit = (int(p) for p in parts)

    if j <= i:
        raise AdjacencyFormatError(f"expected 0 <= i < j, got i={i}, j={j}", lineno)
    if bit not in (0, 1):
        raise AdjacencyFormatError(f"edge bit must be 0 or 1, got {bit}", lineno)

    return EdgeRecord(i, j, bit)


def read_adjacency_list(fp: TextIO) -> Iterator[EdgeRecord]:
    for lineno, line in enumerate(fp, 1):
        if not line.strip():
            continue
        yield parse_edge_record(line, lineno)


def load_adjacency_list(path: str = DEFAULT_OUTPUT) -> List[EdgeRecord]:
    with open(path, "r", encoding="ascii", newline="") as f:
        return list(read_adjacency_list(f))
