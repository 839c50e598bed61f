"""Request Dependencies — hand the store to route handlers.

Invariants:
    - The DatabaseManager is read from app.state (set by the lifespan), never imported
    - Handlers only ever see the WorkoutRepository protocol

Design Decisions:
    - FastAPI Depends over module singletons: tests swap the repository with
      app.dependency_overrides, no monkeypatching of globals
"""

from fastapi import Depends, Request

from workout_api.config import Settings, get_settings
from workout_api.core.repository_protocols import WorkoutRepository
from workout_api.infrastructure.database import DatabaseManager
from workout_api.infrastructure.workout_repository import MongoWorkoutRepository


def get_db_manager(request: Request) -> DatabaseManager | None:
    """The manager opened by the lifespan, or None before startup."""
    return getattr(request.app.state, "db_manager", None)


def get_workout_repository(
    db_manager: DatabaseManager | None = Depends(get_db_manager),
    settings: Settings = Depends(get_settings),
) -> WorkoutRepository:
    """FastAPI dependency for the workout store."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    return MongoWorkoutRepository(
        db_manager.collection(settings.workouts_collection),
    )
