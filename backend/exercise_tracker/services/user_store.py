"""User Store — create, list and resolve users.

Invariants:
    - Username uniqueness is enforced by the database unique constraint, not a pre-check
    - A rejected duplicate leaves the table untouched (transaction rolled back)
    - list_all returns users in creation order

Design Decisions:
    - Implements core.repository_protocols.UserLookup so ExerciseStore can depend on it
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.domain_types import CreateUserParams, is_object_id
from exercise_tracker.core.errors import DuplicateUsernameError
from exercise_tracker.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Persistence for the users table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, params: CreateUserParams) -> User:
        user = User(username=params.username)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(
                "Username already taken", extra={"username": params.username},
            )
            raise DuplicateUsernameError(params.username)
        await self.db.refresh(user)
        logger.info(
            "User created",
            extra={"user_id": user.id, "username": user.username},
        )
        return user

    async def list_all(self) -> list[User]:
        result = await self.db.execute(
            select(User).order_by(User.created_at, User.id),
        )
        return list(result.scalars().all())

    async def get(self, user_id: str) -> User | None:
        """Resolve a user id. Ids that are not 24 hex chars never match."""
        if not is_object_id(user_id):
            return None
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()
