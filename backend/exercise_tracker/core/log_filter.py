"""Log Filter Assembly — turns validated log parameters into store-agnostic filter terms.

Invariants:
    - Always scoped to exactly one user
    - date_from / date_to are inclusive and independently optional
    - limit applies only when present and > 0; zero, negative or absent means "no cap"
    - limits beyond the store integer range also mean "no cap" (nothing can exceed them)

Design Decisions:
    - Pure dataclass output: services/exercise_store.py maps it onto a SELECT,
      tests exercise the branching without a database
"""

from dataclasses import dataclass
from datetime import date

from exercise_tracker.core.domain_types import (
    MAX_STORED_INTEGER, LogQueryParams, UserId,
)
from exercise_tracker.core.exercise_dates import parse_calendar_date


@dataclass(frozen=True)
class LogFilter:
    user_id: UserId
    date_from: date | None = None
    date_to: date | None = None
    limit: int | None = None


def effective_limit(limit: float | None) -> int | None:
    """Positive limits cap the result; anything else disables the cap."""
    if limit is None or not limit > 0 or limit > MAX_STORED_INTEGER:
        return None
    return int(limit)


def build_log_filter(params: LogQueryParams, user_id: UserId) -> LogFilter:
    """Build the filter for a resolved user. Raises InvalidDateError on impossible dates."""
    return LogFilter(
        user_id=user_id,
        date_from=(
            parse_calendar_date(params.date_from)
            if params.date_from is not None else None
        ),
        date_to=(
            parse_calendar_date(params.date_to)
            if params.date_to is not None else None
        ),
        limit=effective_limit(params.limit),
    )
