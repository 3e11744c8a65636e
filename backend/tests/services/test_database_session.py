"""Database Session Manager — error mapping and rollback through manager.session().

Invariants:
    - SQLAlchemy failures leave the session as DatabaseError tagged with the operation
    - A failed commit is rolled back; earlier committed rows survive
    - Non-database exceptions pass through unchanged
"""

import pytest
from sqlalchemy import func, select, text

from exercise_tracker.core.errors import UNKNOWN_CAUSE_MESSAGE, DatabaseError, ErrorCategory
from exercise_tracker.infrastructure.database import DatabaseSessionManager
from exercise_tracker.models.user import User


@pytest.fixture
def manager(test_engine):
    return DatabaseSessionManager(test_engine)


async def _user_count(manager) -> int:
    async with manager.session() as db:
        return (await db.execute(select(func.count()).select_from(User))).scalar_one()


# ─── error mapping ───────────────────────────────────────────────

async def test_unique_violation_on_commit_maps_to_database_error(manager):
    async with manager.session() as db:
        db.add(User(username="runner_one"))
        await db.commit()

    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            db.add(User(username="runner_one"))
            await db.commit()

    err = exc_info.value
    assert err.operation == "commit"
    assert err.category == ErrorCategory.UNKNOWN
    assert err.message == UNKNOWN_CAUSE_MESSAGE
    assert await _user_count(manager) == 1


async def test_operational_error_maps_to_execute(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))
    assert exc_info.value.operation == "execute"


async def test_other_exceptions_pass_through_and_roll_back(manager):
    with pytest.raises(ValueError):
        async with manager.session() as db:
            db.add(User(username="runner_one"))
            await db.flush()
            raise ValueError("boom")
    assert await _user_count(manager) == 0


# ─── lifecycle ───────────────────────────────────────────────────

async def test_health_check_reports_reachable_store(manager):
    assert await manager.health_check() is True


async def test_from_url_builds_sqlite_manager():
    manager = DatabaseSessionManager.from_url("sqlite+aiosqlite:///:memory:")
    try:
        await manager.create_schema()
        assert await manager.health_check() is True
    finally:
        await manager.dispose()
