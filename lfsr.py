# lfsr.py
"""
32-bit linear-feedback shift register.

Taps 32, 16, 7, 2, i.e. the irreducible binary polynomial

    x^32 + x^16 + x^7 + x^2 + 1

Each step XORs bits 0, 16, 25 and 30 of the current word into a feedback
bit, shifts the word right by one and puts the feedback bit into bit 31.
Zero is a fixed point, so it is never accepted as a seed.
"""

from typing import Iterator

from errors import InvalidSeed


WORD_MASK = 0xFFFFFFFF
HIGH_BIT = 31

# Nibble used for edge decisions; 16 levels keeps the comparison a bit mask.
SAMPLE_MASK = 0xF

DEFAULT_SEED = 0xB16B00B5


def lfsr_step(state: int) -> int:
    """Return the state that follows `state` (pure, no validation)."""
    w = state & WORD_MASK
    feedback = (w ^ (w >> 16) ^ (w >> 25) ^ (w >> 30)) & 1
    return (w >> 1) | (feedback << HIGH_BIT)


def validate_seed(seed: int) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidSeed(f"seed must be an integer, got {seed!r}")
    if not (0 < seed <= WORD_MASK):
        raise InvalidSeed(f"seed must be in [1, 0x{WORD_MASK:x}], got {seed:#x}")
    return seed


def iter_lfsr_states(seed: int = DEFAULT_SEED) -> Iterator[int]:
    """Yield seed, step(seed), step(step(seed)), ... forever."""
    state = validate_seed(seed)
    while True:
        yield state
        state = lfsr_step(state)


class LfsrStream:
    """
    LFSR state owned by a single generation session.

    `sample()` reads the low bits of the current state without moving it;
    `advance()` performs exactly one step. Two sessions must never share
    one stream.
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self.seed = validate_seed(seed)
        self.state = self.seed
        self.steps = 0

    def sample(self, mask: int = SAMPLE_MASK) -> int:
        return self.state & mask

    def advance(self) -> int:
        self.state = lfsr_step(self.state)
        self.steps += 1
        return self.state

    def __repr__(self) -> str:
        return f"LfsrStream(seed={self.seed:#010x}, state={self.state:#010x}, steps={self.steps})"


def format_uint32_bin(x: int) -> str:
    """
    Render a 32-bit word MSB first in groups of four bits, e.g.
    0xB16B00B5 -> "1011 0001 0110 1011 0000 0000 1011 0101".
    """
    bits = format(x & WORD_MASK, "032b")
    return " ".join(bits[k:k + 4] for k in range(0, 32, 4))
