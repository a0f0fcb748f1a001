"""Users — user directory and exercise log endpoints under /api/users.

Invariants:
    - Routes hold no business logic: parse, delegate to a service, shape the response
    - Both "/api/users" and "/api/users/" serve the listing and creation routes
    - Unknown or malformed :_id → 404 via ResourceNotFoundError
    - Bodies may be JSON or url-encoded forms (the bundled HTML form posts forms)

Design Decisions:
    - Services built per request from the request's AsyncSession
    - limit/from/to read as raw strings: blank values mean "not given"
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.api.request_body import read_body
from exercise_tracker.config import Settings, get_settings
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.infrastructure.user_repository import SqlAlchemyUserRepository
from exercise_tracker.schemas.exercise import (
    ExerciseAppended, ExerciseCreate, ExerciseLogResponse,
)
from exercise_tracker.schemas.user import UserCreate, UserCreated, UserSummary
from exercise_tracker.services.exercise_log_manager import ExerciseLogManager
from exercise_tracker.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


def get_user_directory(db: AsyncSession = Depends(get_db)) -> UserDirectory:
    return UserDirectory(SqlAlchemyUserRepository(db))


def get_exercise_log_manager(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ExerciseLogManager:
    return ExerciseLogManager(
        SqlAlchemyUserRepository(db), limit_mode=settings.log_limit_mode,
    )


@router.get("", response_model=list[UserSummary])
@router.get("/", response_model=list[UserSummary], include_in_schema=False)
async def list_users(directory: UserDirectory = Depends(get_user_directory)):
    """List all users as {_id, username}."""
    return await directory.list()


@router.post("", response_model=UserCreated)
@router.post("/", response_model=UserCreated, include_in_schema=False)
async def create_user(
    request: Request,
    directory: UserDirectory = Depends(get_user_directory),
):
    """Create a user. Body: {username}."""
    body = await read_body(request, UserCreate)
    return await directory.create(body.username)


@router.post("/{user_id}/exercises", response_model=ExerciseAppended)
async def add_exercise(
    user_id: str,
    request: Request,
    manager: ExerciseLogManager = Depends(get_exercise_log_manager),
):
    """Append an exercise. Body: {description, duration, date?}."""
    body = await read_body(request, ExerciseCreate)
    return await manager.append(
        user_id, body.description, body.duration, body.date,
    )


@router.get("/{user_id}/logs", response_model=ExerciseLogResponse)
async def get_logs(
    user_id: str,
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: str | None = Query(None),
    manager: ExerciseLogManager = Depends(get_exercise_log_manager),
):
    """Read a user's log, optionally bounded by from/to and cut by limit."""
    return await manager.query_log(user_id, date_from, date_to, limit)
