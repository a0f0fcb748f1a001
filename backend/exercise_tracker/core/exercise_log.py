"""Exercise Log — pure shaping of a user's filtered log for the logs endpoint.

Invariants:
    - Empty/missing from & to produce an empty DateRange (no filter, never an empty window)
    - Log order is insertion order; nothing here re-sorts
    - count is taken BEFORE limit is applied, so count and len(log) may differ
    - LogLimitMode.SKIP: log[limit:]; LogLimitMode.FIRST_N: log[:limit] for limit > 0

Design Decisions:
    - SKIP is the default because existing clients depend on it; FIRST_N is opt-in via settings
"""

from exercise_tracker.core.domain_types import DateRange, ExerciseRecord, LogLimitMode
from exercise_tracker.core.errors import ValidationFailedError
from exercise_tracker.core.exercise_input import (
    parse_exercise_date, render_duration, render_exercise_date,
)


def build_date_range(date_from: str | None, date_to: str | None) -> DateRange:
    """Parse optional query bounds. Blank values are ignored."""
    return DateRange(
        start=parse_exercise_date(date_from, "from") if date_from else None,
        end=parse_exercise_date(date_to, "to") if date_to else None,
    )


def parse_limit(value: str | None) -> int | None:
    """Parse the `limit` query parameter. Blank means no limit."""
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        raise ValidationFailedError(f"Invalid limit: '{value}'", "limit")


def to_log_entry(record: ExerciseRecord) -> dict:
    """Project an exercise to its public log shape."""
    return {
        "description": record.description,
        "duration": render_duration(record.duration),
        "date": render_exercise_date(record.date),
    }


def apply_limit(log: list, limit: int | None, mode: LogLimitMode) -> list:
    """Apply the `limit` query parameter according to the configured mode."""
    if limit is None:
        return log
    if mode == LogLimitMode.FIRST_N:
        return log[:limit] if limit > 0 else log
    return log[limit:]


def build_log(
    records: list[ExerciseRecord], limit: int | None, mode: LogLimitMode,
) -> tuple[int, list[dict]]:
    """Return (count before limiting, limited log entries)."""
    entries = [to_log_entry(r) for r in records]
    return len(entries), apply_limit(entries, limit, mode)
