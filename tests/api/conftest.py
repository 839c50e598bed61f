"""API test fixtures — in-memory Mongo + FastAPI test client.

Invariants:
    - Every test gets a fresh mongomock collection
    - get_workout_repository dependency overridden to use that collection
    - Clock ticks one second per call: creation order is unambiguous

Design Decisions:
    - mongomock-motor over a live mongod: fast, no external dependency, supports
      the find/sort/find_one_and_* calls the repository makes
    - Lifespan is not run by ASGITransport, so no real client is ever opened
"""

import itertools
from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from workout_api.api.dependencies import get_workout_repository
from workout_api.infrastructure.workout_repository import MongoWorkoutRepository
from workout_api.main import app

START = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fake_clock():
    ticks = itertools.count()
    return lambda: START + timedelta(seconds=next(ticks))


@pytest.fixture
def workout_collection():
    return AsyncMongoMockClient(tz_aware=True)["workouts_test"]["workouts"]


@pytest.fixture
def workout_repo(workout_collection, fake_clock):
    return MongoWorkoutRepository(workout_collection, clock=fake_clock)


@pytest.fixture
async def client(workout_repo):
    """FastAPI test client with the repository dependency overridden."""
    app.dependency_overrides[get_workout_repository] = lambda: workout_repo
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def seed_workout(workout_repo):
    """Insert a workout directly through the repository."""
    return await workout_repo.create({"title": "Push ups", "reps": 40, "load": 5})
