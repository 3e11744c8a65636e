"""Exercise Dates — calendar-date parsing and the fixed display format.

Invariants:
    - Exercises carry a calendar date only, never a time of day
    - Display format is "Www Mmm DD YYYY" (e.g. "Sun Feb 28 2021"), independent of locale
    - Missing dates resolve to the caller-supplied "today" (UTC at the call site)

Design Decisions:
    - Name tables instead of strftime("%a %b"): strftime follows LC_TIME
"""

from datetime import date

from exercise_tracker.core.errors import InvalidDateError

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_calendar_date(text: str) -> date:
    """Parse a yyyy-mm-dd string. Raises InvalidDateError for impossible dates."""
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise InvalidDateError(text)


def resolve_exercise_date(text: str | None, today: date) -> date:
    """Date to persist for a new exercise: the supplied one, or today."""
    if text is None:
        return today
    return parse_calendar_date(text)


def format_display_date(value: date) -> str:
    """Render e.g. date(2021, 2, 28) as 'Sun Feb 28 2021'."""
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )
