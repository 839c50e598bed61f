"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real MongoDB by accident
os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DATABASE", "workouts_test")
os.environ.setdefault("LOG_FORMAT", "text")
