"""Database Infrastructure — SQLAlchemy declarative Base for the ORM models.

Invariants:
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local runs and tests
"""
