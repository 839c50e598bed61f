"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Lookups return None for a missing workout; callers choose the status code

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake
    - Async in Protocol: implementations do IO
"""

from typing import Any, Protocol

from workout_api.core.domain_types import WorkoutId


class WorkoutRepository(Protocol):
    """Contract for workout persistence, implemented by shell."""
    async def list_recent(self) -> list[dict[str, Any]]: ...
    async def get(self, workout_id: WorkoutId) -> dict[str, Any] | None: ...
    async def create(self, fields: dict[str, Any]) -> dict[str, Any]: ...
    async def delete(self, workout_id: WorkoutId) -> dict[str, Any] | None: ...
    async def update(
        self, workout_id: WorkoutId, fields: dict[str, Any],
    ) -> dict[str, Any] | None: ...
