"""Bit-exact regression tests for the Squares mixing function."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from squares_rng.core import MASK64, squares32, squares32_block, squares64
from squares_rng.keys import KEY_COUNT, key_at

REFERENCE_KEY = 0x2467CB532B5CE8D1

# counter -> squares32(counter, REFERENCE_KEY)
KNOWN_OUTPUTS = {
    0: 2265266757,
    1: 3983016633,
    2: 4184327247,
    3: 1198531189,
    4: 680598762,
    5: 452731528,
    MASK64: 1740783260,
}


@pytest.mark.parametrize("counter,expected", sorted(KNOWN_OUTPUTS.items()))
def test_squares32_known_answers(counter, expected):
    assert squares32(counter, REFERENCE_KEY) == expected


def test_squares32_with_second_table_key():
    assert squares32(1000, 0x4A5FB16E4936F5A7) == 1510476316


def test_squares32_is_deterministic():
    for counter in (0, 1, 12345, MASK64 - 7):
        assert squares32(counter, REFERENCE_KEY) == squares32(counter, REFERENCE_KEY)


def test_squares32_output_is_32_bits():
    for counter in range(2000):
        assert 0 <= squares32(counter, REFERENCE_KEY) <= 0xFFFFFFFF


def test_inputs_reduce_modulo_two_to_the_64():
    assert squares32(-1, REFERENCE_KEY) == KNOWN_OUTPUTS[MASK64]
    assert squares32(1 << 64, REFERENCE_KEY) == KNOWN_OUTPUTS[0]
    assert squares32(3, REFERENCE_KEY + (5 << 64)) == KNOWN_OUTPUTS[3]


def test_squares64_packs_two_staggered_draws():
    assert squares64(0, REFERENCE_KEY) == 0x87053A45ED6802B9
    assert squares64(0, REFERENCE_KEY) == (KNOWN_OUTPUTS[0] << 32) | KNOWN_OUTPUTS[1]


def test_squares64_wraps_second_counter():
    assert squares64(MASK64, REFERENCE_KEY) == 0x67C23E9C87053A45


def test_zero_counter_never_hits_fixed_point_for_table_keys():
    for index in range(KEY_COUNT):
        assert squares32(0, key_at(index)) != 0, index


def test_consecutive_counters_flip_about_half_the_bits():
    samples = 10_000
    total = 0
    previous = squares32(0, REFERENCE_KEY)
    for counter in range(1, samples + 1):
        current = squares32(counter, REFERENCE_KEY)
        total += bin(previous ^ current).count("1")
        previous = current

    mean = total / samples
    assert 15.5 < mean < 16.5


def test_each_output_bit_is_balanced():
    samples = 10_000
    ones = [0] * 32
    for counter in range(samples):
        value = squares32(counter, key_at(2))
        for bit in range(32):
            ones[bit] += (value >> bit) & 1

    assert all(4700 < count < 5300 for count in ones)


def test_block_matches_single_calls():
    block = squares32_block(MASK64 - 2, 6, REFERENCE_KEY)
    expected = [squares32((MASK64 - 2 + i) & MASK64, REFERENCE_KEY) for i in range(6)]
    assert block == expected
    assert block[3:] == [KNOWN_OUTPUTS[0], KNOWN_OUTPUTS[1], KNOWN_OUTPUTS[2]]


def test_block_rejects_negative_count():
    assert squares32_block(0, 0, REFERENCE_KEY) == []
    with pytest.raises(ValueError):
        squares32_block(0, -1, REFERENCE_KEY)


def test_core_is_safe_to_call_from_threads():
    counters = list(range(4000))
    expected = [squares32(c, REFERENCE_KEY) for c in counters]
    with ThreadPoolExecutor(max_workers=4) as pool:
        result = list(pool.map(lambda c: squares32(c, REFERENCE_KEY), counters))
    assert result == expected
