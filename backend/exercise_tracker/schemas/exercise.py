"""Exercise Schemas — append payload, append response and log response.

Invariants:
    - description is free text: numeric values are stringified, not rejected
    - duration accepts any scalar; coercion to a number happens in core, not here
    - date accepts an ISO string, a rendered date string or epoch milliseconds
    - duration is null in responses whenever the stored value is not a finite number
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class ExerciseCreate(BaseModel):
    """Exercise append payload."""
    description: str | None = None
    duration: str | int | float | None = None
    date: str | int | None = None

    @field_validator("description", mode="before")
    @classmethod
    def stringify_scalars(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class ExerciseAppended(BaseModel):
    """The appended exercise merged with its owner's identity."""
    id: UUID = Field(serialization_alias="_id")
    username: str | None
    description: str | None
    duration: float | None
    date: str


class ExerciseLogEntry(BaseModel):
    description: str | None
    duration: float | None
    date: str


class ExerciseLogResponse(BaseModel):
    """A user's filtered log. count is the size before `limit` was applied."""
    id: UUID = Field(serialization_alias="_id")
    username: str | None
    count: int
    log: list[ExerciseLogEntry]
