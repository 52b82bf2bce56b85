"""Database Infrastructure — SQLAlchemy Base for the optional SQL storage backend.

Invariants:
    - Single async engine per SqlStorage (owned by DatabaseSessionManager)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite by default, asyncpg for PostgreSQL (ADR: native async, no thread pool overhead)
"""
