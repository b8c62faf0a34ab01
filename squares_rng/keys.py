"""Read-only access to the built-in key table."""

import operator

from .core import MASK64
from .errors import InvalidKeyIndex
from .keys_table import KEYS

KEY_COUNT = len(KEYS)


def key_count() -> int:
    return KEY_COUNT


def key_at(index: int) -> int:
    """Return the table key at ``index``; never wraps or clamps."""
    index = operator.index(index)
    if not 0 <= index < KEY_COUNT:
        raise InvalidKeyIndex(index, KEY_COUNT)
    return KEYS[index]


def key_bit_balance(key: int) -> int:
    """Count of set bits in the 64-bit key."""
    return bin(key & MASK64).count("1")


def is_balanced_key(key: int, tolerance: int = 12) -> bool:
    # Advisory only: roughly 32 ones and 32 zeros keeps the rotations mixing.
    return abs(key_bit_balance(key) - 32) <= tolerance
