"""Workout Documents — pure builders for the MongoDB documents a workout maps to.

Invariants:
    - Only WorkoutField keys are ever written from user input
    - created_at is set once on insert; updated_at on insert and every update
    - to_public() is the only place `_id` is renamed to `id`

Design Decisions:
    - Pure functions taking `now` explicitly: deterministic tests, no clock in core
    - Update is a `$set` of the provided fields only (partial replacement)
"""

from datetime import datetime
from typing import Any

from workout_api.core.domain_types import WorkoutField

# Newest first; _id breaks ties between workouts created in the same millisecond
NEWEST_FIRST: list[tuple[str, int]] = [("created_at", -1), ("_id", -1)]

_WRITABLE = frozenset(f.value for f in WorkoutField)


def writable_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Keep only user-writable fields, preserving their values."""
    return {k: v for k, v in fields.items() if k in _WRITABLE}


def build_new_document(fields: dict[str, Any], now: datetime) -> dict[str, Any]:
    """Document inserted on create."""
    return {
        **writable_fields(fields),
        "created_at": now,
        "updated_at": now,
    }


def build_update(fields: dict[str, Any], now: datetime) -> dict[str, Any]:
    """`$set` update applying only the provided fields."""
    return {"$set": {**writable_fields(fields), "updated_at": now}}


def to_public(document: dict[str, Any]) -> dict[str, Any]:
    """Convert a stored document to its API shape."""
    public = {k: v for k, v in document.items() if k != "_id"}
    public["id"] = str(document["_id"])
    return public
