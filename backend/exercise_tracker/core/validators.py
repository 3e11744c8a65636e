"""Input Validators — pure shape checks on incoming request fields.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Every function returns a bool and never raises (None is simply invalid)
    - Checks are syntactic only: 9999-99-99 is a valid date, any 24 chars a valid user id

Design Decisions:
    - Existence and uniqueness are checked downstream against the store
"""

import math
import re

from exercise_tracker.core.domain_types import CreateExerciseParams, LogQueryParams

_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_.\-]{8,}$")

USER_ID_LENGTH = 24


def is_date_valid(date: str | None) -> bool:
    """True iff date matches yyyy-mm-dd exactly (no calendar check)."""
    return isinstance(date, str) and _DATE_PATTERN.fullmatch(date) is not None


def is_number_valid(number: float | None) -> bool:
    """True iff number is a number and not NaN. Sign and finiteness are not checked."""
    if number is None or isinstance(number, bool):
        return False
    if not isinstance(number, (int, float)):
        return False
    return not math.isnan(number)


def is_user_id_valid(user_id: str | None) -> bool:
    """True iff user_id is exactly 24 characters long (any charset)."""
    return isinstance(user_id, str) and len(user_id) == USER_ID_LENGTH


def is_username_valid(username: str | None) -> bool:
    """Letters, digits, '_', '-', '.' only, at least 8 characters."""
    return isinstance(username, str) and _USERNAME_PATTERN.fullmatch(username) is not None


def are_exercise_params_valid(params: CreateExerciseParams) -> bool:
    date_ok = params.date is None or is_date_valid(params.date)
    description_ok = bool(params.description)
    duration_ok = is_number_valid(params.duration) and params.duration > 0
    return date_ok and description_ok and duration_ok and is_user_id_valid(params.user_id)


def are_log_params_valid(params: LogQueryParams) -> bool:
    date_from_ok = params.date_from is None or is_date_valid(params.date_from)
    date_to_ok = params.date_to is None or is_date_valid(params.date_to)
    limit_ok = params.limit is None or is_number_valid(params.limit)
    return date_from_ok and date_to_ok and limit_ok and is_user_id_valid(params.user_id)
