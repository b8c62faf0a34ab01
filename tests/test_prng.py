"""Stream generator behaviour: tick accounting, bounds and replay."""

import logging
import math
import struct
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import pytest

from squares_rng import InvalidKeyIndex, InvalidRange, SquaresRNG
from squares_rng.core import MASK64, squares32
from squares_rng.keys import key_at

REFERENCE_KEY = 0x2467CB532B5CE8D1


def test_next_u32_matches_core_and_advances_by_one():
    rng = SquaresRNG(REFERENCE_KEY)
    assert [rng.next_u32() for _ in range(3)] == [2265266757, 3983016633, 4184327247]
    assert rng.position() == 3


def test_next_u64_consumes_two_ticks():
    rng = SquaresRNG(REFERENCE_KEY)
    assert rng.next_u64() == 0x87053A45ED6802B9
    assert rng.position() == 2
    assert rng.next_u32() == 4184327247


def test_counter_wraps_at_64_bits():
    rng = SquaresRNG(REFERENCE_KEY, MASK64)
    assert rng.next_u32() == 1740783260
    assert rng.position() == 0
    assert rng.next_u32() == 2265266757


def test_constructor_masks_inputs():
    rng = SquaresRNG(REFERENCE_KEY | (1 << 64), -1)
    assert rng.key == REFERENCE_KEY
    assert rng.position() == MASK64


def test_from_index_uses_table_key():
    rng = SquaresRNG.from_index(1, 1000)
    assert rng.key == key_at(1)
    assert rng.next_u32() == 1510476316


def test_from_index_rejects_bad_index():
    with pytest.raises(InvalidKeyIndex):
        SquaresRNG.from_index(8192)


def test_signed_accessors():
    rng = SquaresRNG(REFERENCE_KEY)
    assert rng.next_signed_i32() == 2265266757 - 2**32
    assert rng.next_signed_i32() == 3983016633 - 2**32
    rng.seek(0)
    assert rng.next_signed_i64() == 0x87053A45ED6802B9 - 2**64


def test_unit_floats_are_in_half_open_interval():
    rng = SquaresRNG.from_index(7)
    for _ in range(10_000):
        value = rng.next_f64_unit()
        assert 0.0 <= value < 1.0
    for _ in range(10_000):
        value = rng.next_f32_unit()
        assert 0.0 <= value < 1.0


def test_unit_float_tick_accounting():
    rng = SquaresRNG(REFERENCE_KEY)
    assert rng.next_f32_unit() == 0x87053A / 2**24
    assert rng.position() == 1
    rng.seek(0)
    assert rng.random() == (0x87053A45ED6802B9 >> 11) / 2**53
    assert rng.position() == 2


def test_unit_float_mean_near_half():
    rng = SquaresRNG(REFERENCE_KEY)
    mean = sum(rng.next_f64_unit() for _ in range(20_000)) / 20_000
    assert 0.49 < mean < 0.51


def test_range_i64_stays_in_bounds_and_covers_values():
    rng = SquaresRNG(REFERENCE_KEY)
    counts = Counter(rng.next_range_i64(5, 10) for _ in range(10_000))
    assert set(counts) == {5, 6, 7, 8, 9}
    assert all(1700 < count < 2300 for count in counts.values())


def test_range_i64_known_value():
    rng = SquaresRNG(REFERENCE_KEY)
    assert rng.next_range_i64(0, 10) == 5
    assert rng.position() == 1
    rng.seek(0)
    assert rng.next_range_i64(-5, 5) == 0


def test_range_i64_width_selects_draw_size():
    rng = SquaresRNG(REFERENCE_KEY)
    assert rng.next_range_i64(0, 1 << 32) == 2265266757
    assert rng.position() == 1

    rng.seek(0)
    value = rng.next_range_i64(0, (1 << 32) + 1)
    assert 0 <= value <= 1 << 32
    assert rng.position() == 2


def test_range_i64_full_signed_span():
    rng = SquaresRNG(REFERENCE_KEY)
    for _ in range(1000):
        value = rng.next_range_i64(-(2**63), 2**63 - 1)
        assert -(2**63) <= value < 2**63 - 1


@pytest.mark.parametrize("low,high", [(5, 5), (10, 5), (0, 2**63)])
def test_range_i64_invalid(low, high):
    rng = SquaresRNG(REFERENCE_KEY)
    with pytest.raises(InvalidRange):
        rng.next_range_i64(low, high)
    assert rng.position() == 0


def test_randint_is_inclusive():
    rng = SquaresRNG(REFERENCE_KEY)
    seen = {rng.randint(1, 3) for _ in range(500)}
    assert seen == {1, 2, 3}


def test_float_ranges():
    rng = SquaresRNG(REFERENCE_KEY)
    for _ in range(2000):
        assert -3.0 <= rng.next_range_f64(-3.0, 7.5) < 7.5
        assert 2.0 <= rng.next_range_f32(2.0, 2.5) < 2.5
    with pytest.raises(InvalidRange):
        rng.next_range_f64(1.0, 1.0)
    with pytest.raises(InvalidRange):
        rng.next_range_f32(1.0, 0.0)


def test_vectors_have_expected_shape_and_bounds():
    rng = SquaresRNG(REFERENCE_KEY)
    for vec, size in ((rng.vec2(), 2), (rng.vec3(), 3), (rng.vec4(), 4)):
        assert len(vec) == size
        assert all(-1.0 <= component < 1.0 for component in vec)
    assert rng.position() == 2 * 9

    before = rng.position()
    assert len(rng.vec2_f32()) == 2
    assert len(rng.vec3_f32()) == 3
    assert len(rng.vec4_f32()) == 4
    assert rng.position() == before + 9


def test_vector_components_center_on_zero():
    rng = SquaresRNG(REFERENCE_KEY)
    totals = [0.0, 0.0, 0.0]
    for _ in range(10_000):
        for axis, component in enumerate(rng.vec3()):
            totals[axis] += component
    assert all(abs(total / 10_000) < 0.03 for total in totals)


def test_choice_and_index():
    rng = SquaresRNG(REFERENCE_KEY)
    items = ["sword", "shield", "potion"]
    picks = {rng.choice(items) for _ in range(300)}
    assert picks == set(items)
    with pytest.raises(InvalidRange):
        rng.choice([])
    with pytest.raises(InvalidRange):
        rng.next_index(0)


def test_shuffle_is_deterministic_permutation():
    first = list(range(50))
    second = list(range(50))
    SquaresRNG(REFERENCE_KEY, 42).shuffle(first)
    SquaresRNG(REFERENCE_KEY, 42).shuffle(second)
    assert first == second
    assert sorted(first) == list(range(50))
    assert first != list(range(50))


def test_fill_u32_matches_repeated_next():
    bulk = SquaresRNG(REFERENCE_KEY, 10)
    single = SquaresRNG(REFERENCE_KEY, 10)
    assert bulk.fill_u32(16) == [single.next_u32() for _ in range(16)]
    assert bulk.position() == single.position() == 26


def test_replay_from_position():
    rng = SquaresRNG.from_index(3, 500)
    for _ in range(37):
        rng.next_u32()
    saved = rng.position()
    expected = [rng.next_u32() for _ in range(20)]

    replay = SquaresRNG(key_at(3))
    replay.seek(saved)
    assert [replay.next_u32() for _ in range(20)] == expected


def test_jump_matches_offset_start():
    rng = SquaresRNG(REFERENCE_KEY, 900)
    rng.jump(100)
    assert rng.next_u32() == SquaresRNG(REFERENCE_KEY, 1000).next_u32()


def test_jump_wraps_and_rejects_negative():
    rng = SquaresRNG(REFERENCE_KEY, MASK64)
    rng.jump(2)
    assert rng.position() == 1
    with pytest.raises(ValueError):
        rng.jump(-1)


def test_snapshot_restores_stream():
    rng = SquaresRNG.from_index(11, 77)
    rng.next_u64()
    state = rng.snapshot()
    restored = SquaresRNG.from_state(state)
    assert restored == rng
    assert restored.next_u32() == rng.next_u32()


def test_spawn_hands_out_disjoint_blocks():
    parent = SquaresRNG(REFERENCE_KEY, 10)
    children = parent.spawn(4, 1000)
    assert [child.position() for child in children] == [10, 1010, 2010, 3010]
    assert all(child.key == REFERENCE_KEY for child in children)
    assert parent.position() == 10
    assert children[1].next_u32() == squares32(1010, REFERENCE_KEY)


def test_spawn_validates_arguments():
    rng = SquaresRNG(REFERENCE_KEY)
    assert rng.spawn(0, 10) == []
    with pytest.raises(ValueError):
        rng.spawn(-1, 10)
    with pytest.raises(ValueError):
        rng.spawn(2, 0)


def test_spawned_streams_run_in_parallel_like_sequentially():
    def drain(stream):
        return [stream.next_u32() for _ in range(200)]

    sequential = [drain(s) for s in SquaresRNG(REFERENCE_KEY).spawn(4, 200)]
    with ThreadPoolExecutor(max_workers=4) as pool:
        parallel = list(pool.map(drain, SquaresRNG(REFERENCE_KEY).spawn(4, 200)))
    assert parallel == sequential
    assert sum(sequential, []) == SquaresRNG(REFERENCE_KEY).fill_u32(800)


def test_unbalanced_key_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="squares_rng.prng"):
        rng = SquaresRNG(0)
    assert rng.next_u32() == 0
    assert any("set bits" in record.getMessage() for record in caplog.records)


def test_table_key_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="squares_rng.prng"):
        SquaresRNG.from_index(0)
    assert not caplog.records


def _as_binary32(value):
    return struct.unpack("<f", struct.pack("<f", value))[0]


def test_range_f64_handles_span_beyond_float_max():
    rng = SquaresRNG(REFERENCE_KEY)
    low, high = -1.7e308, 1.7e308
    values = [rng.next_range_f64(low, high) for _ in range(1000)]
    assert all(math.isfinite(v) and low <= v < high for v in values)
    assert len(set(values)) > 990
    assert any(v < 0 for v in values) and any(v > 0 for v in values)


def test_range_f32_returns_binary32_values_below_high():
    rng = SquaresRNG(REFERENCE_KEY)
    for _ in range(1000):
        value = rng.next_range_f32(0.1, 0.7)
        assert _as_binary32(value) == value
        assert 0.1 <= value < 0.7
    for _ in range(1000):
        value = rng.next_range_f32(0.0, 1.0 + 1e-9)
        assert _as_binary32(value) == value
        assert value <= 1.0


def test_range_f32_narrow_and_unrepresentable_ranges():
    rng = SquaresRNG(REFERENCE_KEY)
    assert {rng.next_range_f32(1.0, 1.0 + 1e-12) for _ in range(50)} == {1.0}
    with pytest.raises(InvalidRange):
        rng.next_range_f32(1.0 + 1e-12, 1.0 + 2e-12)
    with pytest.raises(InvalidRange):
        rng.next_range_f32(0.0, 1e39)


def test_randint_covers_full_signed_span():
    rng = SquaresRNG(REFERENCE_KEY)
    assert rng.randint(-(2**63), 2**63 - 1) == -(2**63) + 0x87053A45ED6802B9
    assert rng.position() == 2
    top = {rng.randint(2**63 - 3, 2**63 - 1) for _ in range(200)}
    assert top == {2**63 - 3, 2**63 - 2, 2**63 - 1}
    assert rng.randint(7, 7) == 7
    with pytest.raises(InvalidRange):
        rng.randint(5, 4)
    with pytest.raises(InvalidRange):
        rng.randint(0, 2**63)


def test_spawn_does_not_repeat_key_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="squares_rng.prng"):
        parent = SquaresRNG(0xFF)
        children = parent.spawn(3, 10)
    assert len(caplog.records) == 1
    assert [child.key for child in children] == [0xFF] * 3


def test_balance_check_can_be_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="squares_rng.prng"):
        SquaresRNG(0xFF, check_key=False)
    assert not caplog.records
