"""User ORM — the aggregate root that owns an exercise log.

Invariants:
    - id is UUID primary key, generated on insert, never changed
    - username is free text, nullable, NOT unique (duplicates are allowed)
    - exercises load in insertion order (Exercise.id ascending)

Design Decisions:
    - lazy="raise" on exercises: list and lookup never load the log, and an
      accidental attribute access fails loudly; the logs endpoint queries
      exercises directly with its date bounds
    - cascade delete-orphan: exercises have no life outside their user
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class User(Base):
    """User aggregate root — owns all exercises."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise", back_populates="user",
        cascade="all, delete-orphan", lazy="raise",
        order_by="Exercise.id",
    )
