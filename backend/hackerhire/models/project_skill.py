"""ProjectSkill ORM — skill tags attached to a project (duplicates allowed)."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hackerhire.db.base import Base


class ProjectSkill(Base):
    __tablename__ = "project_skills"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    skill: Mapped[str] = mapped_column(String(200), nullable=False)
