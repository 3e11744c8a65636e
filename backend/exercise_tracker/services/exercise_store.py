"""Exercise Store — add exercises for a user and query their log.

Invariants:
    - An exercise is persisted only after its user_id resolved to a stored user
    - Durations above the store integer range are rejected as invalid params
    - The log is always scoped to one user, in creation order, date bounds inclusive
    - Dates leave this store in display form ("Sun Feb 28 2021")

Design Decisions:
    - User resolution goes through the injected UserLookup, never the users table
    - Check-then-insert is not atomic: a user removed between the two statements would
      leave an orphan exercise. Users are never deleted here, so this is a known,
      accepted limitation
"""

import logging
from datetime import date, datetime, timezone
from typing import Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.domain_types import (
    MAX_STORED_INTEGER, CreateExerciseParams, LogQueryParams, UserId, is_object_id,
)
from exercise_tracker.core.errors import (
    EXERCISE_PARAMS_MESSAGE, ParamsValidationError, UserNotFoundError,
)
from exercise_tracker.core.exercise_dates import (
    format_display_date, resolve_exercise_date,
)
from exercise_tracker.core.log_filter import LogFilter, build_log_filter
from exercise_tracker.core.repository_protocols import UserLike, UserLookup
from exercise_tracker.models.exercise import Exercise

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class ExerciseStore:
    """Persistence for the exercises table."""

    def __init__(
        self,
        db: AsyncSession,
        users: UserLookup,
        today: Callable[[], date] = utc_today,
    ):
        self.db = db
        self.users = users
        self.today = today

    async def _resolve_user(self, user_id: str | None) -> UserLike:
        if not is_object_id(user_id):
            raise UserNotFoundError(user_id)
        user = await self.users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        logger.debug("User resolved", extra={"user_id": user_id})
        return user

    async def create(self, params: CreateExerciseParams) -> dict:
        if params.duration > MAX_STORED_INTEGER:
            raise ParamsValidationError(EXERCISE_PARAMS_MESSAGE)
        user = await self._resolve_user(params.user_id)
        exercise = Exercise(
            date=resolve_exercise_date(params.date, self.today()),
            description=params.description,
            duration=int(params.duration),
            user_id=user.id,
        )
        self.db.add(exercise)
        await self.db.commit()
        await self.db.refresh(exercise)
        logger.info("Exercise added", extra={"user_id": user.id})
        return {
            "_id": user.id,
            "username": user.username,
            "date": format_display_date(exercise.date),
            "duration": exercise.duration,
            "description": exercise.description,
        }

    async def log(self, params: LogQueryParams) -> dict:
        user = await self._resolve_user(params.user_id)
        log_filter = build_log_filter(params, UserId(user.id))
        exercises = await self._find(log_filter)
        return {
            "_id": user.id,
            "username": user.username,
            "count": len(exercises),
            "log": [
                {
                    "date": format_display_date(e.date),
                    "description": e.description,
                    "duration": e.duration,
                }
                for e in exercises
            ],
        }

    async def _find(self, log_filter: LogFilter) -> list[Exercise]:
        query = select(Exercise).where(Exercise.user_id == log_filter.user_id)
        if log_filter.date_from is not None:
            query = query.where(Exercise.date >= log_filter.date_from)
        if log_filter.date_to is not None:
            query = query.where(Exercise.date <= log_filter.date_to)
        query = query.order_by(Exercise.id)
        if log_filter.limit is not None:
            query = query.limit(log_filter.limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())
