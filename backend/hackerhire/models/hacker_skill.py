"""HackerSkill ORM — skills a hacker lists on their profile."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hackerhire.db.base import Base


class HackerSkill(Base):
    __tablename__ = "hacker_skills"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    skill: Mapped[str] = mapped_column(String(200), nullable=False)
    years_experience: Mapped[int | None] = mapped_column(Integer, nullable=True)
