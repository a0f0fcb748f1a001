"""Exercise Log Manager — append exercises and read filtered logs.

Invariants:
    - Input is parsed before the user lookup: a bad date is a 400 even for unknown users
    - Unknown or malformed user ids raise ResourceNotFoundError (404), never AttributeError
    - append responds with the new exercise merged with {id, username}, not the whole log
    - query_log counts the filtered log before applying limit

Design Decisions:
    - `now` is injectable so the default date is testable without freezing time
    - Limit mode comes from settings; SKIP keeps the historical log[limit:] behavior
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from exercise_tracker.core.domain_types import LogLimitMode, parse_user_id
from exercise_tracker.core.errors import ErrorContext, ResourceNotFoundError
from exercise_tracker.core.exercise_input import build_exercise_record
from exercise_tracker.core.exercise_log import (
    build_date_range, build_log, parse_limit, to_log_entry,
)
from exercise_tracker.core.repository_protocols import UserLike, UserRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ExerciseLogManager:
    """Exercise append and log query operations."""

    def __init__(
        self,
        repository: UserRepository,
        limit_mode: LogLimitMode = LogLimitMode.SKIP,
        now: Callable[[], datetime] = _utc_now,
    ):
        self.repository = repository
        self.limit_mode = limit_mode
        self.now = now

    async def _get_user_or_404(self, raw_user_id: str) -> UserLike:
        user_id = parse_user_id(raw_user_id)
        user = await self.repository.get_user(user_id) if user_id else None
        if user is None:
            logger.warning("User not found", extra={"user_id": raw_user_id})
            raise ResourceNotFoundError(
                "User", raw_user_id, ErrorContext(user_id=raw_user_id),
            )
        return user

    async def append(
        self,
        raw_user_id: str,
        description: str | None,
        duration: object,
        date: object = None,
    ) -> dict:
        record = build_exercise_record(description, duration, date, self.now())
        user = await self._get_user_or_404(raw_user_id)
        await self.repository.append_exercise(user.id, record)
        logger.info("Exercise appended", extra={"user_id": str(user.id)})
        return {"id": user.id, "username": user.username, **to_log_entry(record)}

    async def query_log(
        self,
        raw_user_id: str,
        date_from: str | None = None,
        date_to: str | None = None,
        limit: str | None = None,
    ) -> dict:
        date_range = build_date_range(date_from, date_to)
        parsed_limit = parse_limit(limit)
        user = await self._get_user_or_404(raw_user_id)
        records = await self.repository.get_exercises(user.id, date_range)
        count, log = build_log(records, parsed_limit, self.limit_mode)
        logger.debug(
            "Log queried",
            extra={
                "user_id": str(user.id), "count": count,
                "limit_mode": self.limit_mode.value,
            },
        )
        return {
            "id": user.id,
            "username": user.username,
            "count": count,
            "log": log,
        }
