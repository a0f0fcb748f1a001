"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps UUID — never use bare UUID in domain logic
    - ExerciseRecord is immutable once built (exercises are never edited)
    - All valid policies encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers for identities: zero runtime cost, full type-checker support
    - str Enums: settings and JSON serialize them without custom encoders
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class ExerciseRecord:
    """One log entry as the core sees it. duration may be NaN or None."""
    description: str | None
    duration: float | None
    date: datetime


@dataclass(frozen=True)
class DateRange:
    """Inclusive bounds on exercise dates. Both None means no filter."""
    start: datetime | None = None
    end: datetime | None = None

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None


# ─── Enums ───────────────────────────────────────────────────────

class LogLimitMode(str, Enum):
    """How `limit` is applied to a filtered log."""
    SKIP = "skip"        # log[limit:] — drops the first `limit` entries
    FIRST_N = "first_n"  # log[:limit] — keeps the first `limit` entries


def parse_user_id(value: str) -> UserId | None:
    """Parse a path id. Malformed ids are just ids that match no user."""
    try:
        return UserId(UUID(value))
    except (ValueError, TypeError, AttributeError):
        return None
