"""User ORM — a person whose exercises are tracked.

Invariants:
    - id is a store-assigned 24-char hex string (see core/domain_types.new_object_id)
    - username is unique; the constraint is enforced by the database
    - username has no length cap (the shape rule only sets a minimum)
    - Users are never updated or deleted
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from exercise_tracker.core.domain_types import new_object_id
from exercise_tracker.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id,
    )
    username: Mapped[str] = mapped_column(
        Text, nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
