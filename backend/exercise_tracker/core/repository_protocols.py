"""Boundary Protocols — contracts between core and the persistence shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - The exercise store reaches users only through UserLookup

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - UserLike instead of the ORM class: tests can pass any object with id + username
"""

from typing import Protocol


class UserLike(Protocol):
    """Structural contract for a stored user."""
    id: str
    username: str


class UserLookup(Protocol):
    """Resolve a user id to a stored user. Injected into the exercise store."""
    async def get(self, user_id: str) -> UserLike | None: ...
