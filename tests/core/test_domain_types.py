"""Domain Types — verifies workout id parsing and the writable field set.

Tests:
    - 24-hex strings parse to ObjectId-backed WorkoutIds
    - Everything else parses to None
"""

import pytest
from bson import ObjectId

from workout_api.core.domain_types import WorkoutField, parse_workout_id


def test_valid_hex_id_parses_to_object_id():
    raw = "6553a1f0c2b4a8e1d2f3a4b5"
    parsed = parse_workout_id(raw)
    assert isinstance(parsed, ObjectId)
    assert str(parsed) == raw


def test_uppercase_hex_id_is_accepted():
    assert parse_workout_id("6553A1F0C2B4A8E1D2F3A4B5") is not None


@pytest.mark.parametrize("raw", [
    "",
    "123",
    "not-an-object-id",
    "6553a1f0c2b4a8e1d2f3a4b",    # 23 chars
    "6553a1f0c2b4a8e1d2f3a4b5a",  # 25 chars
    "zzzzzzzzzzzzzzzzzzzzzzzz",
    "twelve_chars",
])
def test_invalid_ids_parse_to_none(raw):
    assert parse_workout_id(raw) is None


def test_non_string_parses_to_none():
    assert parse_workout_id(b"twelve_bytes") is None


def test_workout_fields_are_title_reps_load():
    assert {f.value for f in WorkoutField} == {"title", "reps", "load"}
