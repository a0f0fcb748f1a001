"""User Repository — SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - list_users selects id and username only (never the exercise log)
    - append_exercise inserts one row; it never rewrites the user's existing log
    - get_exercises applies date bounds in SQL and orders by Exercise.id (insertion order)
    - Every returned ExerciseRecord.date is UTC-aware

Design Decisions:
    - One repository for users and their exercises: exercises have no identity outside a user
    - Commits happen here, not in services: each write is one unit of work
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.domain_types import DateRange, ExerciseRecord, UserId
from exercise_tracker.core.exercise_input import as_utc
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.models.user import User

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository:
    """Persists users and exercises through an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_users(self):
        result = await self.db.execute(
            select(User.id, User.username).order_by(User.created_at),
        )
        return list(result.all())

    async def create_user(self, username: str | None) -> User:
        user = User(username=username)
        self.db.add(user)
        await self.db.commit()
        return user

    async def get_user(self, user_id: UserId) -> User | None:
        result = await self.db.execute(
            select(User).where(User.id == user_id),
        )
        return result.scalar_one_or_none()

    async def append_exercise(
        self, user_id: UserId, record: ExerciseRecord,
    ) -> None:
        self.db.add(Exercise(
            user_id=user_id,
            description=record.description,
            duration=record.duration,
            date=record.date,
        ))
        await self.db.commit()

    async def get_exercises(
        self, user_id: UserId, date_range: DateRange,
    ) -> list[ExerciseRecord]:
        query = select(Exercise).where(Exercise.user_id == user_id)
        if date_range.start is not None:
            query = query.where(Exercise.date >= date_range.start)
        if date_range.end is not None:
            query = query.where(Exercise.date <= date_range.end)
        query = query.order_by(Exercise.id)

        result = await self.db.execute(query)
        return [
            ExerciseRecord(
                description=e.description,
                duration=e.duration,
                date=as_utc(e.date),
            )
            for e in result.scalars().all()
        ]
