"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Lookups return None for a missing user; callers branch on found / not found

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - append_exercise is a single insert, not read-modify-write of the whole user,
      so concurrent appends to one user never overwrite each other
"""

from typing import Protocol

from exercise_tracker.core.domain_types import DateRange, ExerciseRecord, UserId


class UserLike(Protocol):
    """Structural contract for stored users passed between repository and services."""
    id: UserId
    username: str | None


class UserRepository(Protocol):
    """Contract for user & exercise persistence — implemented by shell."""
    async def list_users(self) -> list[UserLike]: ...
    async def create_user(self, username: str | None) -> UserLike: ...
    async def get_user(self, user_id: UserId) -> UserLike | None: ...
    async def append_exercise(
        self, user_id: UserId, record: ExerciseRecord,
    ) -> None: ...
    async def get_exercises(
        self, user_id: UserId, date_range: DateRange,
    ) -> list[ExerciseRecord]: ...
