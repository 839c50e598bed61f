"""Domain Types — identifier and field types shared across the codebase.

Invariants:
    - WorkoutId wraps a store-native ObjectId, never a bare str in domain logic
    - parse_workout_id() is the only place raw path strings become WorkoutIds
    - A raw id is valid iff it is a 24-character hex string

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Parse-or-None instead of raising: routes decide which status a bad id maps to
"""

from enum import Enum
from typing import NewType

from bson import ObjectId


# ─── Identity Types ──────────────────────────────────────────────

WorkoutId = NewType("WorkoutId", ObjectId)


def parse_workout_id(raw: str) -> WorkoutId | None:
    """Return the WorkoutId for raw, or None if it is not a valid ObjectId."""
    # ObjectId.is_valid also accepts 12-byte bytes; path params are always str
    if not isinstance(raw, str) or not ObjectId.is_valid(raw):
        return None
    return WorkoutId(ObjectId(raw))


# ─── Enums ───────────────────────────────────────────────────────

class WorkoutField(str, Enum):
    """User-writable workout fields. Timestamps and id are store-managed."""
    TITLE = "title"
    REPS = "reps"
    LOAD = "load"
