"""User Schemas — create payload and user response shapes.

Invariants:
    - UserCreate.username is optional: a missing username is stored as null
    - Unknown payload fields are ignored, never stored
    - UserSummary never carries the exercise log
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class UserCreate(BaseModel):
    """User creation — deliberately lax, only username is read."""
    username: str | None = None

    @field_validator("username", mode="before")
    @classmethod
    def stringify_scalars(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class UserSummary(BaseModel):
    """One row of the user listing."""
    id: UUID = Field(serialization_alias="_id")
    username: str | None


class StoredExercise(BaseModel):
    description: str | None
    duration: float | None
    date: str


class UserCreated(BaseModel):
    """Freshly stored user, including its (empty) exercise log."""
    id: UUID = Field(serialization_alias="_id")
    username: str | None
    exercises: list[StoredExercise] = []
