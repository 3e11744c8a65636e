"""Domain Types — identifiers and per-operation parameter structs.

Invariants:
    - UserId is a 24-char lowercase hex string (object-id shaped)
    - Parameter structs are frozen: built once at the HTTP boundary, never mutated
    - Numeric fields may hold float("nan") for unparseable input; validators reject it

Design Decisions:
    - NewType over wrapper classes: zero runtime cost
    - Object-id layout (seconds prefix + random tail) keeps ids roughly time-ordered
"""

import re
import secrets
import time
from dataclasses import dataclass
from typing import NewType

UserId = NewType("UserId", str)

_OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

# Largest integer the store can hold (signed 64-bit: SQLite INTEGER, PostgreSQL BIGINT)
MAX_STORED_INTEGER = 2**63 - 1


def new_object_id() -> UserId:
    """Generate a store identifier: 8 hex chars of UNIX seconds + 16 random hex chars."""
    return UserId(f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}")


def is_object_id(value: object) -> bool:
    """True iff value is exactly 24 hex characters."""
    return isinstance(value, str) and bool(_OBJECT_ID_PATTERN.match(value))


@dataclass(frozen=True)
class CreateUserParams:
    username: str


@dataclass(frozen=True)
class CreateExerciseParams:
    """Add-exercise input. date is yyyy-mm-dd or None (meaning today)."""
    date: str | None
    description: str | None
    duration: float
    user_id: str | None


@dataclass(frozen=True)
class LogQueryParams:
    """Log query input. Every field but user_id is optional."""
    date_from: str | None
    date_to: str | None
    limit: float | None
    user_id: str | None
