"""ORM Models — SQLAlchemy declarative models for users and exercises.

Invariants:
    - All models inherit from Base (db/base.py)
    - Exercise.user_id references a user at the application level only (no FK constraint)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
"""

from exercise_tracker.models.user import User  # noqa: F401
from exercise_tracker.models.exercise import Exercise  # noqa: F401
