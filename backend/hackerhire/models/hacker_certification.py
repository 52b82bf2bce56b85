"""HackerCertification ORM — credentials a hacker lists on their profile."""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hackerhire.db.base import Base


class HackerCertification(Base):
    __tablename__ = "hacker_certifications"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    issuer: Mapped[str | None] = mapped_column(String(200), nullable=True)
    date_obtained: Mapped[date | None] = mapped_column(Date, nullable=True)
