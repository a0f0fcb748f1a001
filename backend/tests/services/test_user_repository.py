"""User Repository — SQLAlchemy persistence against in-memory SQLite.

Invariants:
    - Exercises come back in insertion order, not date order
    - Date bounds are inclusive and applied in SQL
    - Dates come back UTC-aware even though SQLite stores them naive
    - SQLite stores NaN durations as NULL
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import InvalidRequestError

from exercise_tracker.core.domain_types import DateRange, ExerciseRecord
from exercise_tracker.infrastructure.user_repository import SqlAlchemyUserRepository


def _day(d: int) -> datetime:
    return datetime(2024, 1, d, tzinfo=timezone.utc)


async def test_create_and_get_user(test_db):
    repo = SqlAlchemyUserRepository(test_db)
    created = await repo.create_user("ada")
    fetched = await repo.get_user(created.id)
    assert fetched.id == created.id
    assert fetched.username == "ada"


async def test_get_unknown_user_returns_none(test_db):
    assert await SqlAlchemyUserRepository(test_db).get_user(uuid4()) is None


async def test_list_users_projects_id_and_username(test_db):
    repo = SqlAlchemyUserRepository(test_db)
    await repo.create_user("ada")
    await repo.create_user("grace")
    rows = await repo.list_users()
    assert sorted(r.username for r in rows) == ["ada", "grace"]
    assert all(r.id is not None for r in rows)


async def test_exercises_keep_insertion_order(test_db):
    repo = SqlAlchemyUserRepository(test_db)
    user = await repo.create_user("ada")
    for d, name in ((3, "late"), (1, "early"), (2, "middle")):
        await repo.append_exercise(user.id, ExerciseRecord(name, 10.0, _day(d)))

    records = await repo.get_exercises(user.id, DateRange())
    assert [r.description for r in records] == ["late", "early", "middle"]


async def test_exercises_filtered_by_inclusive_bounds(test_db):
    repo = SqlAlchemyUserRepository(test_db)
    user = await repo.create_user("ada")
    for d in (1, 2, 3, 4):
        await repo.append_exercise(user.id, ExerciseRecord(f"d{d}", 10.0, _day(d)))

    records = await repo.get_exercises(user.id, DateRange(_day(2), _day(3)))
    assert [r.description for r in records] == ["d2", "d3"]


async def test_exercises_scoped_to_user(test_db):
    repo = SqlAlchemyUserRepository(test_db)
    ada = await repo.create_user("ada")
    grace = await repo.create_user("grace")
    await repo.append_exercise(ada.id, ExerciseRecord("run", 10.0, _day(1)))
    assert await repo.get_exercises(grace.id, DateRange()) == []


async def test_dates_come_back_utc_aware(test_db):
    repo = SqlAlchemyUserRepository(test_db)
    user = await repo.create_user("ada")
    stamp = datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)
    await repo.append_exercise(user.id, ExerciseRecord("run", 10.0, stamp))

    [record] = await repo.get_exercises(user.id, DateRange())
    assert record.date == stamp
    assert record.date.tzinfo == timezone.utc


async def test_nan_duration_reads_back_as_null_on_sqlite(test_db):
    repo = SqlAlchemyUserRepository(test_db)
    user = await repo.create_user("ada")
    await repo.append_exercise(user.id, ExerciseRecord("run", float("nan"), _day(1)))

    [record] = await repo.get_exercises(user.id, DateRange())
    assert record.duration is None


async def test_user_exercises_are_never_lazy_loaded(test_db):
    repo = SqlAlchemyUserRepository(test_db)
    created = await repo.create_user("ada")
    test_db.expunge_all()
    fetched = await repo.get_user(created.id)
    with pytest.raises(InvalidRequestError):
        fetched.exercises
