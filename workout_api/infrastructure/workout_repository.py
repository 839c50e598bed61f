"""Workout Repository — MongoDB implementation of the WorkoutRepository protocol.

Invariants:
    - Every method issues exactly one collection call
    - Lookups by id return None when nothing matches (never raise for "missing")
    - Driver errors surface as DatabaseError via store_errors()

Design Decisions:
    - find_one_and_delete / find_one_and_update: single-document atomic operations,
      no read-then-write races between concurrent requests
    - Clock injected: tests get strictly increasing timestamps
"""

from datetime import datetime, timezone
from typing import Any, Callable

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

from workout_api.core.domain_types import WorkoutId
from workout_api.core.workout_documents import (
    NEWEST_FIRST, build_new_document, build_update, writable_fields,
)
from workout_api.infrastructure.database import store_errors


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MongoWorkoutRepository:
    """Reads and writes workouts in a single Mongo collection."""

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._collection = collection
        self._clock = clock

    async def list_recent(self) -> list[dict[str, Any]]:
        with store_errors("find"):
            cursor = self._collection.find({}).sort(NEWEST_FIRST)
            return await cursor.to_list(length=None)

    async def get(self, workout_id: WorkoutId) -> dict[str, Any] | None:
        with store_errors("find_one"):
            return await self._collection.find_one({"_id": workout_id})

    async def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        document = build_new_document(fields, self._clock())
        with store_errors("insert"):
            result = await self._collection.insert_one(document)
        # pymongo also sets _id on the passed dict
        document["_id"] = result.inserted_id
        return document

    async def delete(self, workout_id: WorkoutId) -> dict[str, Any] | None:
        with store_errors("find_one_and_delete"):
            return await self._collection.find_one_and_delete({"_id": workout_id})

    async def update(
        self, workout_id: WorkoutId, fields: dict[str, Any],
    ) -> dict[str, Any] | None:
        if not writable_fields(fields):
            # Nothing to change: behave like an update that matched and left the record as is
            return await self.get(workout_id)
        with store_errors("find_one_and_update"):
            return await self._collection.find_one_and_update(
                {"_id": workout_id},
                build_update(fields, self._clock()),
                return_document=ReturnDocument.AFTER,
            )
