"""SQLAlchemy Declarative Base — shared metadata for the SQL storage backend.

Invariants:
    - All nine marketplace tables hang off Base.metadata
    - Constraint and index names are deterministic (naming convention below)

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - Named constraints: Alembic batch mode on SQLite can only drop or alter
      constraints it can name
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all HackerHire ORM models."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
