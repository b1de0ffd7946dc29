"""Tests for the decoding pipeline."""
from __future__ import annotations

import pytest

from shuffleid.codec import build_state
from shuffleid.core.decoder import decode_id
from shuffleid.domain.models import CodecOptions


@pytest.fixture
def state():
    return build_state(CodecOptions(blocklist=[]))


def test_decode_empty_string(state) -> None:
    assert decode_id(state, "") == []


@pytest.mark.parametrize("id_", ["*", "86Rf07*", "86 Rf07", "é"])
def test_decode_rejects_characters_outside_alphabet(state, id_: str) -> None:
    assert decode_id(state, id_) == []


def test_decode_simple_id(state) -> None:
    assert decode_id(state, "86Rf07") == [1, 2, 3]


def test_decode_padded_id(state) -> None:
    assert decode_id(state, "86Rf07xd4zBmiJXQG6otHEbew02c3PWsUOLZxADhCpKj7aVFv9I8RquYrNlSTM") == [1, 2, 3]


def test_decode_prefix_only_is_empty(state) -> None:
    assert decode_id(state, "8") == []


def test_decode_stops_at_empty_chunk(state) -> None:
    assert decode_id(state, "8R") == []


def test_decode_returns_partial_result_for_trailing_separator(state) -> None:
    assert decode_id(state, "86R") == [1]


def test_decode_stops_when_value_exceeds_uint64(state) -> None:
    # prefix "b" selects digits where "n" is 1 and "Z" is the separator
    assert decode_id(state, "b" + "n" * 20) == []
    assert decode_id(state, "bM") == [0]


def test_decode_is_deterministic(state) -> None:
    assert decode_id(state, "aho1e") == decode_id(state, "aho1e") == [4572721]
