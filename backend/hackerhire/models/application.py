"""Application ORM — a hacker's bid on a project.

Invariants:
    - Always inserted with status "pending"
    - status transitions: pending -> accepted | rejected (enforced in core)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hackerhire.db.base import Base


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    hacker_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    proposal: Mapped[str] = mapped_column(Text, nullable=False)
    estimated_time: Mapped[str] = mapped_column(String(100), nullable=False)
    price_quote: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
