"""Key table integrity and lookup failures."""

import pytest

from squares_rng import InvalidKeyIndex, SquaresError
from squares_rng.keys import (
    KEY_COUNT,
    is_balanced_key,
    key_at,
    key_bit_balance,
    key_count,
)
from squares_rng.keys_table import KEYS


def test_table_holds_8192_keys():
    assert key_count() == 8192
    assert KEY_COUNT == 8192
    assert isinstance(KEYS, tuple)


def test_first_key_is_reference_key():
    assert key_at(0) == 0x2467CB532B5CE8D1


def test_lookup_is_stable():
    for index in (0, 1, 4095, 8191):
        assert key_at(index) == key_at(index) == KEYS[index]


def test_keys_are_distinct():
    assert len(set(KEYS)) == len(KEYS)


def test_keys_follow_digit_rules():
    for key in KEYS:
        digits = f"{key:016x}"
        assert len(digits) == 16
        assert "0" not in digits
        assert len(set(digits[:8])) == 8
        assert len(set(digits[8:])) == 8
        assert key & 1


def test_table_keys_pass_balance_check():
    assert all(is_balanced_key(key) for key in KEYS)


@pytest.mark.parametrize("index", [8192, -1, -8192, (1 << 64) - 1])
def test_out_of_range_index_fails(index):
    with pytest.raises(InvalidKeyIndex) as excinfo:
        key_at(index)
    assert excinfo.value.index == index
    assert isinstance(excinfo.value, IndexError)
    assert isinstance(excinfo.value, SquaresError)


def test_non_integral_index_is_type_error():
    with pytest.raises(TypeError):
        key_at(1.5)


def test_bit_balance_helpers():
    assert key_bit_balance(0) == 0
    assert key_bit_balance((1 << 64) - 1) == 64
    assert key_bit_balance(0xFFFFFFFF) == 32
    assert is_balanced_key(0xFFFFFFFF)
    assert not is_balanced_key(0)
    assert is_balanced_key(0xFFFF, tolerance=16)
    assert not is_balanced_key(0xFFFF, tolerance=15)
