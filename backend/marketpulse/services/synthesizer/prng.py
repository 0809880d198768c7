"""
Seeded Pseudo-Random Primitives

Stateless, reproducible random numbers for synthetic market data.
The same (seed, index) pair yields the same float in every process, so
two requests inside one seed bucket see identical synthetic series.
"""

import math
from typing import Callable

MASK_32 = 0xFFFFFFFF
MULBERRY_INCREMENT = 0x6D2B79F5


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= MASK_32
    return value - 0x100000000 if value & 0x80000000 else value


def _imul(a: int, b: int) -> int:
    """32-bit integer multiply (low 32 bits, unsigned)."""
    return (a * b) & MASK_32


def string_hash(text: str) -> int:
    """
    Rolling 31x polynomial hash over UTF-16 code units.

    Returns a signed 32-bit integer; the empty string hashes to 0.
    """
    h = 0
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + unit)
    return h


def seeded_random(seed: str, index: int = 0) -> float:
    """
    Deterministic float in [0, 1) for a (seed, index) pair.

    Independent streams are just different seed suffixes, e.g.
    seeded_random(seed + "call", i) vs seeded_random(seed + "put", i).
    """
    h = string_hash(f"{seed}{index}")
    return abs(math.fmod(math.sin(h) * 10000, 1.0))


def mulberry32(seed: int) -> Callable[[], float]:
    """
    Mulberry32 generator seeded with a 32-bit integer.

    Each call of the returned function advances its own private state and
    returns a float in [0, 1).
    """
    state = (seed + MULBERRY_INCREMENT) & MASK_32

    def next_random() -> float:
        nonlocal state
        t = state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
        state = t
        return ((t ^ (t >> 14)) & MASK_32) / 4294967296

    return next_random


def date_seed(ymd: str) -> int:
    """Integer seed for a YYYY-MM-DD date string."""
    return abs(string_hash(ymd))
