"""Tests for the encoding pipeline."""
from __future__ import annotations

import logging

import pytest

from shuffleid.codec import build_state
from shuffleid.core.encoder import build_id, encode_numbers, numbers_offset, working_alphabet
from shuffleid.domain.models import CodecOptions
from shuffleid.utils.constants import MAX_NUMBER
from shuffleid.utils.errors import BlocklistMaxAttempts, CodecError, NumberOutOfRange

SHUFFLED_DEFAULT = "fwjBhEY2uczNPDiloxmvISCrytaJO4d71T0W3qnMZbXVHg6eR8sAQ5KkpLUGF9"


@pytest.fixture
def state():
    return build_state(CodecOptions(blocklist=[]))


def test_numbers_offset_mixes_length_values_and_positions() -> None:
    assert numbers_offset(SHUFFLED_DEFAULT, [1, 2, 3]) == 49
    assert numbers_offset(SHUFFLED_DEFAULT, [0]) == 41


def test_working_alphabet_prefix_precedes_reversal() -> None:
    prefix, working = working_alphabet(SHUFFLED_DEFAULT, 49)

    assert prefix == "8"
    assert working.startswith("Re6gHVXb")
    assert working.endswith("QAs8")
    assert sorted(working) == sorted(SHUFFLED_DEFAULT)


def test_encode_empty_sequence(state) -> None:
    assert encode_numbers(state, []) == ""


def test_encode_simple_sequence(state) -> None:
    assert encode_numbers(state, [1, 2, 3]) == "86Rf07"


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (0, "bM"),
        (1, "Uk"),
        (2, "gb"),
        (3, "Ef"),
        (4, "Vq"),
        (5, "uw"),
        (6, "OI"),
        (7, "AX"),
        (8, "p6"),
        (9, "nJ"),
    ],
)
def test_encode_single_numbers(state, number: int, expected: str) -> None:
    assert encode_numbers(state, [number]) == expected


def test_build_id_increment_shifts_prefix(state) -> None:
    assert build_id(state, [4572721], 0) == "aho1e"
    assert build_id(state, [4572721], 1) == "JExTR"


def test_build_id_pads_to_min_length() -> None:
    padded = build_state(CodecOptions(min_length=10, blocklist=[]))

    assert build_id(padded, [1, 2, 3]) == "86Rf07xd4z"


def test_blocked_id_is_regenerated_and_logged(caplog) -> None:
    blocked = build_state(CodecOptions(blocklist=["ArUO"]))

    with caplog.at_level(logging.DEBUG, logger="shuffleid"):
        assert encode_numbers(blocked, [100000]) == "QyG4"

    assert any("blocked id 'ArUO'" in record.message for record in caplog.records)


def test_blocklist_retries_are_bounded(caplog) -> None:
    blocked = build_state(CodecOptions(alphabet="abc", min_length=3, blocklist=["cab", "abc", "bca"]))

    with caplog.at_level(logging.DEBUG, logger="shuffleid"):
        with pytest.raises(BlocklistMaxAttempts, match="max attempts"):
            encode_numbers(blocked, [0])

    attempts = [record for record in caplog.records if record.message.startswith("blocked id")]
    assert len(attempts) == len(blocked.alphabet) + 1
    assert [record.message for record in attempts][-1] == "blocked id 'cab' (increment=3), retrying"
    assert any("[ENC]" in record.message for record in caplog.records)


@pytest.mark.parametrize("bad", [-1, MAX_NUMBER + 1, 1.5, "1", True, None])
def test_encode_rejects_values_outside_uint64(state, bad) -> None:
    with pytest.raises(NumberOutOfRange):
        encode_numbers(state, [1, bad])


def test_number_out_of_range_is_a_value_error(state) -> None:
    with pytest.raises(ValueError):
        encode_numbers(state, [-5])
    with pytest.raises(CodecError):
        encode_numbers(state, [-5])


def test_encode_accepts_max_uint64(state) -> None:
    assert encode_numbers(state, [MAX_NUMBER])
