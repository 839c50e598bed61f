"""Workout Schemas — Pydantic models for the workout API boundary.

Invariants:
    - WorkoutCreate requires title (non-empty), reps and load
    - WorkoutUpdate accepts any subset; unknown keys ignored
    - WorkoutResponse is the only shape a workout leaves the API in

Design Decisions:
    - No range checks on reps/load: zero and negative values are stored as given
    - Explicit nulls in a PATCH body are dropped by to_fields(), not written
    - Non-empty title is checked on create only; an update stores "" as given
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_EXAMPLE = {"title": "Push ups", "reps": 40, "load": 5}


class WorkoutCreate(BaseModel):
    """Workout creation: all fields required."""
    model_config = ConfigDict(json_schema_extra={"example": _EXAMPLE})

    title: str = Field(min_length=1, description="The title of the workout")
    reps: int = Field(description="The number of repetitions for the workout")
    load: int = Field(description="The load (weight) used in the workout")

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump()


class WorkoutUpdate(BaseModel):
    """Partial workout update; only provided fields are replaced."""
    model_config = ConfigDict(json_schema_extra={"example": {"reps": 50}})

    title: str | None = None
    reps: int | None = None
    load: int | None = None

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class WorkoutResponse(BaseModel):
    """Public-facing workout data."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "6553a1f0c2b4a8e1d2f3a4b5",
                **_EXAMPLE,
                "created_at": "2024-01-01T12:00:00Z",
                "updated_at": "2024-01-01T12:00:00Z",
            },
        },
    )

    id: str
    title: str
    reps: int
    load: int
    created_at: datetime
    updated_at: datetime
