"""Exercise Store — referential check, date handling and log queries.

Tests cover:
    - unknown or malformed user ids raise UserNotFoundError and persist nothing
    - missing dates default to the injected "today"
    - log filters: inclusive bounds, positive limit, creation order
    - the user lookup is injected (any UserLookup works)
"""

from dataclasses import dataclass
from datetime import date

import pytest
from sqlalchemy import func, select

from exercise_tracker.core.domain_types import (
    CreateExerciseParams, CreateUserParams, LogQueryParams,
)
from exercise_tracker.core.errors import InvalidDateError, UserNotFoundError
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.services.exercise_store import ExerciseStore
from exercise_tracker.services.user_store import UserStore

TODAY = date(2024, 5, 17)


@pytest.fixture
async def user(test_db):
    return await UserStore(test_db).create(CreateUserParams(username="runner_one"))


@pytest.fixture
def store(test_db):
    return ExerciseStore(test_db, UserStore(test_db), today=lambda: TODAY)


def _exercise(user_id, date=None, description="run", duration=30):
    return CreateExerciseParams(
        date=date, description=description, duration=duration, user_id=user_id,
    )


def _log(user_id, date_from=None, date_to=None, limit=None):
    return LogQueryParams(
        date_from=date_from, date_to=date_to, limit=limit, user_id=user_id,
    )


async def _count_exercises(db) -> int:
    return (await db.execute(select(func.count()).select_from(Exercise))).scalar_one()


# ─── create ──────────────────────────────────────────────────────

async def test_create_returns_user_and_display_date(store, user):
    result = await store.create(_exercise(user.id, date="2021-02-28"))
    assert result == {
        "_id": user.id,
        "username": "runner_one",
        "date": "Sun Feb 28 2021",
        "duration": 30,
        "description": "run",
    }


async def test_create_without_date_uses_today(store, user):
    result = await store.create(_exercise(user.id))
    assert result["date"] == "Fri May 17 2024"


@pytest.mark.parametrize("user_id", ["0" * 24, "x" * 24, "short"])
async def test_create_for_unknown_user_persists_nothing(store, test_db, user, user_id):
    with pytest.raises(UserNotFoundError):
        await store.create(_exercise(user_id))
    assert await _count_exercises(test_db) == 0


async def test_create_with_impossible_date_persists_nothing(store, test_db, user):
    with pytest.raises(InvalidDateError):
        await store.create(_exercise(user.id, date="2021-13-99"))
    assert await _count_exercises(test_db) == 0


async def test_create_uses_injected_lookup(test_db):
    @dataclass
    class _User:
        id: str
        username: str

    class _Lookup:
        async def get(self, user_id):
            return _User(id=user_id, username="from_lookup")

    store = ExerciseStore(test_db, _Lookup(), today=lambda: TODAY)
    result = await store.create(_exercise("abcdef0123456789abcdef01"))
    assert result["username"] == "from_lookup"
    assert await _count_exercises(test_db) == 1


# ─── log ─────────────────────────────────────────────────────────

@pytest.fixture
async def five_exercises(store, user):
    for day in ("2021-01-05", "2021-01-01", "2021-02-10", "2021-03-15", "2021-04-20"):
        await store.create(_exercise(user.id, date=day, description=f"ex {day}"))
    return user


async def test_log_returns_all_in_creation_order(store, five_exercises):
    result = await store.log(_log(five_exercises.id))
    assert result["_id"] == five_exercises.id
    assert result["username"] == "runner_one"
    assert result["count"] == 5
    assert [e["description"] for e in result["log"]] == [
        "ex 2021-01-05", "ex 2021-01-01", "ex 2021-02-10",
        "ex 2021-03-15", "ex 2021-04-20",
    ]


async def test_log_limit_caps_count_and_entries(store, five_exercises):
    result = await store.log(_log(five_exercises.id, limit=3))
    assert result["count"] == 3
    assert len(result["log"]) == 3


@pytest.mark.parametrize("limit", [0, -2])
async def test_log_non_positive_limit_is_ignored(store, five_exercises, limit):
    result = await store.log(_log(five_exercises.id, limit=limit))
    assert result["count"] == 5


async def test_log_date_range_is_inclusive(store, five_exercises):
    result = await store.log(
        _log(five_exercises.id, date_from="2021-01-05", date_to="2021-03-15"),
    )
    assert [e["date"] for e in result["log"]] == [
        "Tue Jan 05 2021", "Wed Feb 10 2021", "Mon Mar 15 2021",
    ]


async def test_log_bounds_are_independent(store, five_exercises):
    after = await store.log(_log(five_exercises.id, date_from="2021-03-01"))
    assert after["count"] == 2
    before = await store.log(_log(five_exercises.id, date_to="2021-01-04"))
    assert before["count"] == 1
    assert before["log"][0]["date"] == "Fri Jan 01 2021"


async def test_log_excludes_other_users(store, test_db, five_exercises):
    other = await UserStore(test_db).create(CreateUserParams(username="runner_two"))
    await store.create(_exercise(other.id, date="2021-01-02"))

    result = await store.log(_log(other.id))
    assert result["count"] == 1
    assert result["username"] == "runner_two"


async def test_log_for_unknown_user(store, user):
    with pytest.raises(UserNotFoundError):
        await store.log(_log("f" * 24))


async def test_log_entry_shape(store, user):
    await store.create(_exercise(user.id, date="2021-02-28", duration=45))
    result = await store.log(_log(user.id))
    assert result["log"] == [
        {"date": "Sun Feb 28 2021", "description": "run", "duration": 45},
    ]
