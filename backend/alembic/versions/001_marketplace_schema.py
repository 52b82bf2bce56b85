"""Marketplace schema — users, projects, skills, engagements, contact inbox.

Revision ID: 001_marketplace
Revises: None
Create Date: 2026-10-18

Foreign-key columns are plain indexed integers: deleting a project or user
leaves dependent rows in place.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_marketplace"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_AUTOINCREMENT = {"sqlite_autoincrement": True}


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(timezone=True), nullable=False,
        server_default=sa.func.now(),
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("user_type", sa.String(20), nullable=False),
        sa.Column("full_name", sa.String(200), nullable=False),
        sa.Column("company", sa.String(200), nullable=True),
        sa.Column("title", sa.String(200), nullable=True),
        sa.Column("bio", sa.Text, nullable=True),
        sa.Column("location", sa.String(200), nullable=True),
        sa.Column("profile_image", sa.String(2000), nullable=True),
        sa.Column("is_verified", sa.Boolean, nullable=False, server_default=sa.false()),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("client_id", sa.Integer, nullable=False, index=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("requirements", sa.Text, nullable=False),
        sa.Column("budget", sa.String(100), nullable=False),
        sa.Column("timeframe", sa.String(100), nullable=False),
        sa.Column("additional_details", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="open"),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "project_skills",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("project_id", sa.Integer, nullable=False, index=True),
        sa.Column("skill", sa.String(200), nullable=False),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "hacker_skills",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, nullable=False, index=True),
        sa.Column("skill", sa.String(200), nullable=False),
        sa.Column("years_experience", sa.Integer, nullable=True),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "hacker_certifications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, nullable=False, index=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("issuer", sa.String(200), nullable=True),
        sa.Column("date_obtained", sa.Date, nullable=True),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("project_id", sa.Integer, nullable=False, index=True),
        sa.Column("client_id", sa.Integer, nullable=False, index=True),
        sa.Column("hacker_id", sa.Integer, nullable=False, index=True),
        sa.Column("rating", sa.Float, nullable=False),
        sa.Column("comment", sa.Text, nullable=True),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "testimonials",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("review_id", sa.Integer, nullable=False, index=True),
        sa.Column("is_featured", sa.Boolean, nullable=False, server_default=sa.false()),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "applications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("project_id", sa.Integer, nullable=False, index=True),
        sa.Column("hacker_id", sa.Integer, nullable=False, index=True),
        sa.Column("proposal", sa.Text, nullable=False),
        sa.Column("estimated_time", sa.String(100), nullable=False),
        sa.Column("price_quote", sa.String(100), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "contact_messages",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("subject", sa.String(300), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("inquiry_type", sa.String(50), nullable=False),
        sa.Column("is_read", sa.Boolean, nullable=False, server_default=sa.false()),
        _created_at(),
        **_AUTOINCREMENT,
    )


def downgrade() -> None:
    for table in (
        "contact_messages", "applications", "testimonials", "reviews",
        "hacker_certifications", "hacker_skills", "project_skills",
        "projects", "users",
    ):
        op.drop_table(table)
