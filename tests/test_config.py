"""Settings — verifies environment parsing and defaults."""

import pytest
from pydantic import ValidationError

from workout_api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("MONGODB_URL", raising=False)
    monkeypatch.delenv("MONGODB_DATABASE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.mongodb_url == "mongodb://localhost:27017"
    assert settings.mongodb_database == "workouts"
    assert settings.workouts_collection == "workouts"


def test_mongo_uri_alias(monkeypatch):
    monkeypatch.delenv("MONGODB_URL", raising=False)
    monkeypatch.setenv("MONGO_URI", "mongodb+srv://user:pw@cluster.example.net")
    settings = Settings(_env_file=None)
    assert settings.mongodb_url == "mongodb+srv://user:pw@cluster.example.net"


def test_rejects_non_mongodb_url(monkeypatch):
    monkeypatch.setenv("MONGODB_URL", "postgresql://localhost/db")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
