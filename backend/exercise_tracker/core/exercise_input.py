"""Exercise Input — pure coercion of raw request values into exercise fields.

Invariants:
    - coerce_duration never raises: unparseable input becomes NaN, which is stored as-is
    - parse_exercise_date always returns a timezone-aware UTC datetime or raises ExerciseDateError
    - render_exercise_date drops time-of-day ("Mon Jan 15 2024")
    - Naive datetimes (SQLite round-trips) are treated as UTC

Design Decisions:
    - Numeric coercion mirrors the lenient rules clients already rely on: blank is 0,
      hex/octal/binary literals and "Infinity" are numbers, everything else is NaN
    - Date-only strings are UTC midnight so the rendered date matches what was sent
"""

import math
import re
from datetime import datetime, timezone

from exercise_tracker.core.domain_types import ExerciseRecord
from exercise_tracker.core.errors import ExerciseDateError

RENDERED_DATE_FORMAT = "%a %b %d %Y"

_DECIMAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_RADIX_LITERALS = (
    (re.compile(r"^0[xX][0-9a-fA-F]+$"), 16),
    (re.compile(r"^0[oO][0-7]+$"), 8),
    (re.compile(r"^0[bB][01]+$"), 2),
)
_INFINITIES = {
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}


def _to_float(value: int | float) -> float:
    """Integers past the float range become signed infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def coerce_duration(value: object) -> float:
    """Coerce a raw duration to float. Non-numeric input yields NaN."""
    if value is None:
        return math.nan
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return _to_float(value)
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if not text:
        return 0.0
    if text in _INFINITIES:
        return _INFINITIES[text]
    for pattern, base in _RADIX_LITERALS:
        if pattern.match(text):
            return _to_float(int(text[2:], base))
    if _DECIMAL.match(text):
        return float(text)
    return math.nan


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_exercise_date(value: object, field: str = "date") -> datetime:
    """Parse an ISO date/datetime, a rendered date, or epoch milliseconds."""
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise ExerciseDateError(str(value), field)
    if not isinstance(value, str):
        raise ExerciseDateError(str(value), field)

    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = None
    if parsed is not None:
        try:
            return as_utc(parsed)
        except OverflowError:
            raise ExerciseDateError(value, field)
    try:
        return datetime.strptime(text, RENDERED_DATE_FORMAT).replace(
            tzinfo=timezone.utc,
        )
    except ValueError:
        raise ExerciseDateError(value, field)


def render_exercise_date(value: datetime) -> str:
    """Render a stored timestamp as a date-only string, e.g. 'Mon Jan 15 2024'."""
    return as_utc(value).strftime(RENDERED_DATE_FORMAT)


def render_duration(value: float | None) -> float | None:
    """JSON has no NaN/Infinity — invalid numbers go out as null."""
    if value is None or not math.isfinite(value):
        return None
    return value


def build_exercise_record(
    description: str | None,
    duration: object,
    date: object,
    now: datetime,
) -> ExerciseRecord:
    """Build the record to append. A missing or falsy date means `now`."""
    return ExerciseRecord(
        description=description,
        duration=coerce_duration(duration),
        date=parse_exercise_date(date) if date else as_utc(now),
    )
