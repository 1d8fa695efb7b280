"""Database Layer — SQLAlchemy declarative Base shared by all ORM models.

Invariants:
    - Every ORM model registers on db.base.Base.metadata
    - All sessions are async (AsyncSession), created by infrastructure/database.py

Design Decisions:
    - aiosqlite for local/tests, asyncpg for PostgreSQL: same async code path for both
"""
