"""Workout API Package — CRUD HTTP API for workouts backed by MongoDB.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
