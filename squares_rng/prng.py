
# Squares counter-based RNG stream for deterministic game sims (no external deps).
# Output is a pure function of (counter, key); the counter is the only state.
import logging
from dataclasses import InitVar, dataclass
from typing import List, MutableSequence, Sequence, Tuple, TypeVar

from .core import MASK64, squares32, squares32_block, squares64
from .errors import InvalidRange
from .keys import is_balanced_key, key_at, key_bit_balance
from .mapping import (
    bounded,
    check_f32_range,
    check_float_range,
    check_i64_range,
    clamp,
    scale_unit,
    to_signed32,
    to_signed64,
    to_f32,
    unit_f32,
    unit_f64,
)
from .models import StreamConfig, StreamState

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class SquaresRNG:
    """One stream: a key plus a counter that advances by one per 32-bit draw.

    Not safe to share between threads. Give each worker its own stream with a
    distinct key or a disjoint counter block (see ``spawn`` and ``jump``).
    """

    key: int
    counter: int = 0
    check_key: InitVar[bool] = True

    def __post_init__(self, check_key: bool) -> None:
        self.key &= MASK64
        self.counter &= MASK64
        if check_key and not is_balanced_key(self.key):
            logger.warning(
                "Key %#018x has %d set bits; output quality is not guaranteed.",
                self.key,
                key_bit_balance(self.key),
            )

    @classmethod
    def from_index(cls, index: int, counter: int = 0) -> "SquaresRNG":
        key = key_at(index)
        logger.debug("Stream from table key %d (%#018x) at counter %d", index, key, counter)
        return cls(key, counter)

    @classmethod
    def from_state(cls, state: StreamState) -> "SquaresRNG":
        return cls(state.key, state.counter)

    @classmethod
    def from_config(cls, cfg: StreamConfig) -> "SquaresRNG":
        return cls(cfg.resolve_key(), cfg.start_counter)

    def next_u32(self) -> int:
        value = squares32(self.counter, self.key)
        self.counter = (self.counter + 1) & MASK64
        return value

    def next_u64(self) -> int:
        # Consumes two ticks: high half at counter, low half at counter + 1.
        value = squares64(self.counter, self.key)
        self.counter = (self.counter + 2) & MASK64
        return value

    def next_signed_i32(self) -> int:
        return to_signed32(self.next_u32())

    def next_signed_i64(self) -> int:
        return to_signed64(self.next_u64())

    def fill_u32(self, count: int) -> List[int]:
        values = squares32_block(self.counter, count, self.key)
        self.counter = (self.counter + count) & MASK64
        return values

    def next_f32_unit(self) -> float:
        return unit_f32(self.next_u32())

    def next_f64_unit(self) -> float:
        return unit_f64(self.next_u64())

    def random(self) -> float:
        return self.next_f64_unit()

    def next_range_f64(self, low: float, high: float) -> float:
        check_float_range(low, high)
        return scale_unit(self.next_f64_unit(), low, high)

    def next_range_f32(self, low: float, high: float) -> float:
        """Binary32 value in [low, high), drawn from a 24-bit unit sample."""
        first, last = check_f32_range(low, high)
        value = to_f32(scale_unit(self.next_f32_unit(), low, high))
        return clamp(value, first, last)

    def vec2(self) -> Tuple[float, float]:
        return (self.next_range_f64(-1.0, 1.0), self.next_range_f64(-1.0, 1.0))

    def vec3(self) -> Tuple[float, float, float]:
        return tuple(self.next_range_f64(-1.0, 1.0) for _ in range(3))

    def vec4(self) -> Tuple[float, float, float, float]:
        return tuple(self.next_range_f64(-1.0, 1.0) for _ in range(4))

    def vec2_f32(self) -> Tuple[float, float]:
        return (self.next_range_f32(-1.0, 1.0), self.next_range_f32(-1.0, 1.0))

    def vec3_f32(self) -> Tuple[float, float, float]:
        return tuple(self.next_range_f32(-1.0, 1.0) for _ in range(3))

    def vec4_f32(self) -> Tuple[float, float, float, float]:
        return tuple(self.next_range_f32(-1.0, 1.0) for _ in range(4))

    def next_range_i64(self, low: int, high: int) -> int:
        """Uniform integer in [low, high) via Lemire's multiply-and-reject.

        Spans up to 2**32 draw one 32-bit value per attempt (one tick); wider
        spans draw a 64-bit value per attempt (two ticks).
        """
        return low + self._below(check_i64_range(low, high))

    def randint(self, a: int, b: int) -> int:
        # inclusive a..b; a..b may cover all 2**64 signed values
        return a + self._below(check_i64_range(a, b, inclusive=True))

    def _below(self, span: int) -> int:
        if span <= 1 << 32:
            return bounded(self.next_u32, span, 32)
        return bounded(self.next_u64, span, 64)

    def next_index(self, size: int) -> int:
        if size <= 0:
            raise InvalidRange(f"Cannot pick an index from an empty collection (size={size}).")
        return self.next_range_i64(0, size)

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.next_index(len(seq))]

    def shuffle(self, items: MutableSequence) -> None:
        for i in range(len(items) - 1, 0, -1):
            j = self.next_index(i + 1)
            items[i], items[j] = items[j], items[i]

    def jump(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"jump distance must be non-negative, received {n}")
        self.counter = (self.counter + n) & MASK64

    def seek(self, counter: int) -> None:
        logger.debug("Seek %d -> %d", self.counter, counter & MASK64)
        self.counter = counter & MASK64

    def position(self) -> int:
        return self.counter

    def snapshot(self) -> StreamState:
        return StreamState(key=self.key, counter=self.counter)

    def spawn(self, count: int, block_size: int) -> List["SquaresRNG"]:
        """Streams sharing this key, each starting ``block_size`` ticks after the last.

        The first child starts at the current position. This stream is not
        advanced; call ``jump(count * block_size)`` to move past the blocks.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, received {count}")
        if block_size <= 0:
            raise ValueError(f"block_size must be positive, received {block_size}")
        logger.debug("Spawning %d streams of %d ticks from counter %d", count, block_size, self.counter)
        # The parent already vetted the key; children skip the balance warning.
        return [
            SquaresRNG(self.key, (self.counter + i * block_size) & MASK64, check_key=False)
            for i in range(count)
        ]
