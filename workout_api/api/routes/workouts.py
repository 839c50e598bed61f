"""Workout Routes — list, get, create, delete and update workouts.

Invariants:
    - Each handler makes exactly one repository call
    - Malformed or unknown id: GET → 404, DELETE/PATCH → 400
    - Create failures → 400 carrying the store's message
    - List is newest first

Design Decisions:
    - GET raises ResourceNotFoundError, DELETE/PATCH raise NoSuchResourceError
    - DELETE answers 204 with no body (HTTP forbids one on 204)
    - Collection routes also answer on the trailing-slash path, no redirect
    - PATCH body is optional; a missing body is the empty update
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from workout_api.api.dependencies import get_workout_repository
from workout_api.core.domain_types import parse_workout_id
from workout_api.core.errors import (
    DatabaseError, NoSuchResourceError, PersistenceError, ResourceNotFoundError,
)
from workout_api.core.repository_protocols import WorkoutRepository
from workout_api.core.workout_documents import to_public
from workout_api.schemas.workout import WorkoutCreate, WorkoutResponse, WorkoutUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/workouts", tags=["workouts"])

_NOT_FOUND_DOC = {"description": "No workout found with the given id"}


@router.get("/", response_model=list[WorkoutResponse], include_in_schema=False)
@router.get(
    "", response_model=list[WorkoutResponse],
    summary="Get all workouts",
)
async def list_workouts(
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """All workouts, most recently created first."""
    workouts = await repo.list_recent()
    return [to_public(w) for w in workouts]


@router.get(
    "/{workout_id}", response_model=WorkoutResponse,
    summary="Get a single workout",
    responses={status.HTTP_404_NOT_FOUND: _NOT_FOUND_DOC},
)
async def get_workout(
    workout_id: str, repo: WorkoutRepository = Depends(get_workout_repository),
):
    oid = parse_workout_id(workout_id)
    if oid is None:
        raise ResourceNotFoundError("Workout", workout_id)
    workout = await repo.get(oid)
    if workout is None:
        raise ResourceNotFoundError("Workout", workout_id)
    return to_public(workout)


@router.post(
    "/", response_model=WorkoutResponse,
    status_code=status.HTTP_201_CREATED, include_in_schema=False,
)
@router.post(
    "", response_model=WorkoutResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new workout",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Bad request"}},
)
async def create_workout(
    body: WorkoutCreate, repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Create a workout. Any store failure is reported as 400."""
    try:
        workout = await repo.create(body.to_fields())
    except DatabaseError as e:
        raise PersistenceError(e.cause or e.message, "create") from e
    logger.info(
        f"Workout created: {workout['_id']}",
        extra={"workout_id": str(workout["_id"])},
    )
    return to_public(workout)


@router.delete(
    "/{workout_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a workout",
    responses={status.HTTP_400_BAD_REQUEST: _NOT_FOUND_DOC},
)
async def delete_workout(
    workout_id: str, repo: WorkoutRepository = Depends(get_workout_repository),
):
    oid = parse_workout_id(workout_id)
    if oid is None:
        raise NoSuchResourceError("Workout", workout_id)
    workout = await repo.delete(oid)
    if workout is None:
        raise NoSuchResourceError("Workout", workout_id)
    logger.info(f"Workout deleted: {workout_id}", extra={"workout_id": workout_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{workout_id}", response_model=WorkoutResponse,
    summary="Update a workout",
    responses={status.HTTP_400_BAD_REQUEST: _NOT_FOUND_DOC},
)
async def update_workout(
    workout_id: str,
    body: WorkoutUpdate | None = None,
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Replace only the fields present in the body. No body changes nothing."""
    oid = parse_workout_id(workout_id)
    if oid is None:
        raise NoSuchResourceError("Workout", workout_id)
    workout = await repo.update(oid, body.to_fields() if body else {})
    if workout is None:
        raise NoSuchResourceError("Workout", workout_id)
    return to_public(workout)
