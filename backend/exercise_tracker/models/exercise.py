"""Exercise ORM — one logged activity of a user.

Invariants:
    - date is a calendar date (no time-of-day); duration is whole minutes (signed 64-bit)
    - user_id must name an existing user at insert time (checked by ExerciseStore)
    - Rows are immutable once written; id order is creation order

Design Decisions:
    - No ForeignKey on user_id: the relation is application-level, users do not own exercises
    - Integer surrogate key gives the log an explicit, stable order
"""

import datetime

from sqlalchemy import BigInteger, Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from exercise_tracker.db.base import Base


class Exercise(Base):
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[int] = mapped_column(BigInteger, nullable=False)
    user_id: Mapped[str] = mapped_column(String(24), nullable=False, index=True)
