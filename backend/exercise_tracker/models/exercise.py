"""Exercise ORM — one entry in a user's log.

Invariants:
    - Always belongs to a User (user_id FK, cascade on delete)
    - id is monotonically increasing: ordering by id is insertion order
    - duration may hold NaN (PostgreSQL) or NULL (SQLite turns NaN into NULL)
    - date stored in UTC
"""

import uuid
from datetime import datetime

from sqlalchemy import Integer, Text, Float, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class Exercise(Base):
    """Exercise entity — description, duration and date under one user."""
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration: Mapped[float | None] = mapped_column(Float, nullable=True)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )

    user: Mapped["User"] = relationship("User", back_populates="exercises")
