"""Persisted stream state and configuration dataclasses."""

import dataclasses
import json

import pytest

from squares_rng import InvalidKeyIndex, SquaresRNG, StreamConfig, StreamState
from squares_rng.keys import key_at


def test_state_round_trips_through_json():
    rng = SquaresRNG.from_index(5, 123)
    for _ in range(9):
        rng.next_u32()

    payload = json.dumps(rng.snapshot().to_dict())
    state = StreamState.from_dict(json.loads(payload))

    assert state == StreamState(key=key_at(5), counter=132)
    resumed = SquaresRNG.from_state(state)
    assert [resumed.next_u32() for _ in range(5)] == [rng.next_u32() for _ in range(5)]


def test_state_requires_both_fields():
    with pytest.raises(KeyError):
        StreamState.from_dict({"key": 1})


def test_state_is_immutable():
    state = StreamState(key=1, counter=2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.counter = 3


def test_config_defaults_to_first_table_key():
    cfg = StreamConfig()
    assert cfg.resolve_key() == key_at(0)
    rng = SquaresRNG.from_config(cfg)
    assert rng.snapshot() == StreamState(key=key_at(0), counter=0)


def test_config_explicit_key_wins():
    cfg = StreamConfig(key_index=9, key=0xC8E4FD154CE32F6D, start_counter=40)
    rng = SquaresRNG.from_config(cfg)
    assert rng.key == 0xC8E4FD154CE32F6D
    assert rng.position() == 40


def test_config_bad_index_fails_on_resolve():
    with pytest.raises(InvalidKeyIndex):
        StreamConfig(key_index=9000).resolve_key()
