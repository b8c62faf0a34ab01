"""Squares counter-based mixing function (Widynski, arXiv:2004.06278)."""

from typing import List

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1


def _swap_halves(x: int) -> int:
    return (x >> 32) | ((x << 32) & MASK64)


def squares32(counter: int, key: int) -> int:
    """Four-round Squares output for one (counter, key) pair."""
    key &= MASK64
    x = (counter * key) & MASK64
    y = x
    z = (y + key) & MASK64

    x = _swap_halves((x * x + y) & MASK64)  # round 1
    x = _swap_halves((x * x + z) & MASK64)  # round 2
    x = _swap_halves((x * x + y) & MASK64)  # round 3
    return ((x * x + z) & MASK64) >> 32  # round 4, high half only


def squares64(counter: int, key: int) -> int:
    """Two staggered 32-bit draws packed high-then-low; uses two counter ticks."""
    counter &= MASK64
    high = squares32(counter, key)
    low = squares32((counter + 1) & MASK64, key)
    return (high << 32) | low


def squares32_block(start: int, count: int, key: int) -> List[int]:
    if count < 0:
        raise ValueError(f"count must be non-negative, received {count}")
    start &= MASK64
    return [squares32((start + offset) & MASK64, key) for offset in range(count)]
