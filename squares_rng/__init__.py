"""Public package surface for the Squares counter-based RNG."""

import logging

from .core import squares32, squares32_block, squares64
from .errors import InvalidKeyIndex, InvalidRange, SquaresError
from .keys import KEY_COUNT, is_balanced_key, key_at, key_count
from .models import StreamConfig, StreamState
from .prng import SquaresRNG

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "KEY_COUNT",
    "InvalidKeyIndex",
    "InvalidRange",
    "SquaresError",
    "SquaresRNG",
    "StreamConfig",
    "StreamState",
    "is_balanced_key",
    "key_at",
    "key_count",
    "squares32",
    "squares32_block",
    "squares64",
]
