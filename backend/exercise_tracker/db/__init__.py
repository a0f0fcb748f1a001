"""Database Infrastructure — SQLAlchemy Base shared by all ORM models.

Invariants:
    - All sessions are async (AsyncSession); the engine lives in infrastructure/database.py

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
