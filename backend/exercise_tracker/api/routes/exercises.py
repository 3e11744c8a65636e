"""Exercise Routes — users, exercises and the exercise log.

Invariants:
    - Every handler validates shape (core/validators.py) before touching the store
    - Shape failures raise ParamsValidationError with the route's fixed message
    - Domain failures propagate as ExerciseTrackerError; error_handlers maps them
    - Routes contain no business logic beyond trimming and parsing raw fields
"""

import logging

from fastapi import APIRouter, Depends, Form, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.api.routes.form_fields import (
    parse_int, trimmed, trimmed_or_none,
)
from exercise_tracker.core.domain_types import (
    CreateExerciseParams, CreateUserParams, LogQueryParams,
)
from exercise_tracker.core.errors import (
    EXERCISE_PARAMS_MESSAGE, LOG_PARAMS_MESSAGE, USERNAME_MESSAGE,
    ParamsValidationError,
)
from exercise_tracker.core.validators import (
    are_exercise_params_valid, are_log_params_valid, is_username_valid,
)
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.schemas.exercise import ExerciseLogResponse, ExerciseResponse
from exercise_tracker.schemas.user import UserResponse
from exercise_tracker.services.exercise_store import ExerciseStore
from exercise_tracker.services.user_store import UserStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/exercise", tags=["exercise"])


def get_user_store(db: AsyncSession = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_exercise_store(
    db: AsyncSession = Depends(get_db),
    users: UserStore = Depends(get_user_store),
) -> ExerciseStore:
    return ExerciseStore(db, users)


@router.get("/log", response_model=ExerciseLogResponse)
async def get_exercise_log(
    user_id: str | None = Query(None, alias="userId"),
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: str | None = Query(None),
    exercises: ExerciseStore = Depends(get_exercise_store),
):
    """Exercise log of one user, optionally date-bounded and limited."""
    params = LogQueryParams(
        date_from=date_from,
        date_to=date_to,
        limit=None if limit is None else parse_int(limit),
        user_id=user_id,
    )
    if not are_log_params_valid(params):
        raise ParamsValidationError(LOG_PARAMS_MESSAGE)
    return ExerciseLogResponse.model_validate(await exercises.log(params))


@router.post(
    "/add", response_model=ExerciseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_exercise(
    user_id: str | None = Form(None, alias="userId"),
    description: str | None = Form(None),
    duration: str | None = Form(None),
    date: str | None = Form(None),
    exercises: ExerciseStore = Depends(get_exercise_store),
):
    """Add an exercise to an existing user's log."""
    params = CreateExerciseParams(
        date=trimmed_or_none(date),
        description=trimmed(description),
        duration=parse_int(trimmed(duration)),
        user_id=trimmed(user_id),
    )
    if not are_exercise_params_valid(params):
        raise ParamsValidationError(EXERCISE_PARAMS_MESSAGE)
    return ExerciseResponse.model_validate(await exercises.create(params))


@router.get("/users", response_model=list[UserResponse])
async def list_users(users: UserStore = Depends(get_user_store)):
    """All users, projected to {_id, username}."""
    return [UserResponse.model_validate(u) for u in await users.list_all()]


@router.post(
    "/new-user", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    username: str | None = Form(None),
    users: UserStore = Depends(get_user_store),
):
    """Create a user with a unique username."""
    name = trimmed(username)
    if not is_username_valid(name):
        raise ParamsValidationError(USERNAME_MESSAGE)
    user = await users.create(CreateUserParams(username=name))
    return UserResponse.model_validate(user)
