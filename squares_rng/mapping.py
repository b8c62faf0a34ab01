"""Pure reshaping helpers built only on raw Squares output."""

import math
import struct
from typing import Callable, Tuple

from .core import MASK32, MASK64
from .errors import InvalidRange

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1


def _f32_from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits))[0]


F32_MAX = _f32_from_bits(0x7F7FFFFF)


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def to_signed32(value: int) -> int:
    """Two's-complement view of a raw 32-bit output."""
    value &= MASK32
    return value - (1 << 32) if value >> 31 else value


def to_signed64(value: int) -> int:
    value &= MASK64
    return value - (1 << 64) if value >> 63 else value


def unit_f32(raw32: int) -> float:
    """Top 24 bits over 2**24: exact in binary32 and strictly below 1.0."""
    return ((raw32 & MASK32) >> 8) * (1.0 / (1 << 24))


def unit_f64(raw64: int) -> float:
    """Top 53 bits over 2**53: exact in binary64 and strictly below 1.0."""
    return ((raw64 & MASK64) >> 11) * (1.0 / (1 << 53))


def to_f32(value: float) -> float:
    """Round to the nearest binary32 value (kept as a Python float)."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def f32_next_down(value: float) -> float:
    """Largest binary32 strictly below the binary32 ``value``."""
    if value == 0.0:
        return -_f32_from_bits(1)
    bits = struct.unpack("<I", struct.pack("<f", value))[0]
    # sign-magnitude: stepping toward -inf shrinks positives and grows negatives
    return _f32_from_bits(bits - 1 if value > 0 else bits + 1)


def f32_next_up(value: float) -> float:
    return -f32_next_down(-value)


def check_i64_range(low: int, high: int, inclusive: bool = False) -> int:
    """Validate a signed 64-bit range and return its span.

    The range is half-open unless ``inclusive`` is set, in which case ``high``
    itself can be drawn and the span may reach 2**64.
    """
    if not (I64_MIN <= low <= I64_MAX and I64_MIN <= high <= I64_MAX):
        bracket = "]" if inclusive else ")"
        raise InvalidRange(f"Range [{low}, {high}{bracket} does not fit in signed 64 bits.")
    span = high - low + 1 if inclusive else high - low
    if span <= 0:
        raise InvalidRange(f"Empty range: low ({low}) and high ({high}) leave nothing to draw.")
    return span


def check_float_range(low: float, high: float) -> None:
    if not (math.isfinite(low) and math.isfinite(high)):
        raise InvalidRange(f"Range [{low}, {high}) must have finite bounds.")
    if high <= low:
        raise InvalidRange(f"Empty range: high ({high}) must be greater than low ({low}).")


def check_f32_range(low: float, high: float) -> Tuple[float, float]:
    """Validate a half-open range and return its lowest and highest binary32 members."""
    check_float_range(low, high)
    if max(abs(low), abs(high)) > F32_MAX:
        raise InvalidRange(f"Range [{low}, {high}) exceeds the binary32 limit {F32_MAX}.")
    first = to_f32(low)
    if first < low:
        first = f32_next_up(first)
    last = to_f32(high)
    if last >= high:
        last = f32_next_down(last)
    if last < first:
        raise InvalidRange(f"Range [{low}, {high}) holds no binary32 value.")
    return first, last


def scale_unit(unit: float, low: float, high: float) -> float:
    """Map a unit sample onto [low, high); rounding never lands on ``high``."""
    span = high - low
    if math.isinf(span):
        # Finite bounds whose distance overflows: work on half-scale values.
        value = 2.0 * (low / 2.0 + (high / 2.0 - low / 2.0) * unit)
    else:
        value = low + span * unit
    if value >= high:
        return math.nextafter(high, low)
    return value


def bounded(draw: Callable[[], int], span: int, bits: int) -> int:
    """Lemire's nearly-divisionless mapping of ``bits``-wide draws onto [0, span).

    ``draw`` must return uniform integers in [0, 2**bits) and ``span`` must be
    in [1, 2**bits]. Draws whose low product half falls under the rejection
    threshold are discarded, so every result in the span is equally likely.
    The modulo for the threshold only runs when a rejection is possible.
    """
    mask = (1 << bits) - 1
    product = draw() * span
    leftover = product & mask
    if leftover < span:
        threshold = ((1 << bits) - span) % span
        while leftover < threshold:
            product = draw() * span
            leftover = product & mask
    return product >> bits
