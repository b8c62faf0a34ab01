"""Utility-layer reshaping: signed views, unit floats, bounded integers."""

import math

import pytest

from squares_rng import InvalidRange
from squares_rng.mapping import (
    F32_MAX,
    I64_MAX,
    I64_MIN,
    bounded,
    check_f32_range,
    check_float_range,
    check_i64_range,
    clamp,
    f32_next_down,
    f32_next_up,
    scale_unit,
    to_f32,
    to_signed32,
    to_signed64,
    unit_f32,
    unit_f64,
)


def test_signed_views_reinterpret_bits():
    assert to_signed32(0) == 0
    assert to_signed32(0x7FFFFFFF) == 2**31 - 1
    assert to_signed32(0x80000000) == -(2**31)
    assert to_signed32(0xFFFFFFFF) == -1
    assert to_signed64(0xFFFFFFFFFFFFFFFF) == -1
    assert to_signed64(1 << 63) == I64_MIN


def test_unit_floats_stay_below_one():
    assert unit_f32(0) == 0.0
    assert unit_f64(0) == 0.0
    assert unit_f32(0xFFFFFFFF) == 1.0 - 2**-24
    assert unit_f64(0xFFFFFFFFFFFFFFFF) == 1.0 - 2**-53
    assert unit_f32(0xFFFFFFFF) < 1.0
    assert unit_f64(0xFFFFFFFFFFFFFFFF) < 1.0


def test_unit_f32_is_exact_ratio_of_kept_bits():
    assert unit_f32(0x87053A45) == 0x87053A / 2**24


def test_scale_unit_never_reaches_high():
    low = 1.0
    high = math.nextafter(1.0, 2.0)
    value = scale_unit(1.0 - 2**-53, low, high)
    assert value < high
    assert value == 1.0
    assert scale_unit(0.5, -2.0, 2.0) == 0.0


def test_check_i64_range():
    assert check_i64_range(5, 10) == 5
    assert check_i64_range(I64_MIN, I64_MAX) == 2**64 - 1
    for low, high in ((5, 5), (10, 5), (0, I64_MAX + 1), (I64_MIN - 1, 0)):
        with pytest.raises(InvalidRange):
            check_i64_range(low, high)


def test_check_float_range():
    check_float_range(-1.0, 1.0)
    for low, high in ((1.0, 1.0), (2.0, 1.0), (0.0, math.inf), (math.nan, 1.0)):
        with pytest.raises(InvalidRange):
            check_float_range(low, high)


def test_bounded_rejects_biased_draw():
    # span 3 over 2-bit draws: 0 is rejected, 1/2/3 map to 0/1/2.
    assert bounded(iter([1]).__next__, 3, 2) == 0
    assert bounded(iter([2]).__next__, 3, 2) == 1
    assert bounded(iter([3]).__next__, 3, 2) == 2
    assert bounded(iter([0, 0, 2]).__next__, 3, 2) == 1


def test_bounded_full_width_span_is_identity():
    draws = iter([0, 1, 0xFFFFFFFF])
    assert [bounded(draws.__next__, 1 << 32, 32) for _ in range(3)] == [0, 1, 0xFFFFFFFF]


def test_bounded_power_of_two_uses_high_bits():
    assert bounded(iter([0xC0000000]).__next__, 4, 32) == 3


def test_scale_unit_survives_overflowing_span():
    low, high = -1.7e308, 1.7e308
    assert scale_unit(0.0, low, high) == low
    assert scale_unit(0.5, low, high) == 0.0
    assert scale_unit(1.0 - 2**-53, low, high) < high


def test_check_i64_range_inclusive():
    assert check_i64_range(I64_MIN, I64_MAX, inclusive=True) == 2**64
    assert check_i64_range(5, 5, inclusive=True) == 1
    for low, high in ((6, 5), (0, I64_MAX + 1)):
        with pytest.raises(InvalidRange):
            check_i64_range(low, high, inclusive=True)


def test_binary32_neighbours():
    assert f32_next_down(1.0) == 1.0 - 2**-24
    assert f32_next_up(1.0) == 1.0 + 2**-23
    assert f32_next_down(-1.0) == -(1.0 + 2**-23)
    assert f32_next_down(0.0) == -(2**-149)
    assert f32_next_up(-0.0) == 2**-149
    assert F32_MAX == (2 - 2**-23) * 2**127


def test_to_f32_rounds_once():
    assert to_f32(0.1) != 0.1
    assert to_f32(to_f32(0.1)) == to_f32(0.1)
    assert to_f32(0.5) == 0.5


def test_check_f32_range_returns_binary32_bounds():
    assert check_f32_range(0.0, 1.0) == (0.0, 1.0 - 2**-24)
    assert check_f32_range(1.0 + 1e-12, 3.0) == (1.0 + 2**-23, 3.0 - 2**-22)
    with pytest.raises(InvalidRange):
        check_f32_range(-1e39, 0.0)


def test_clamp():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(0.25, 0.0, 1.0) == 0.25
