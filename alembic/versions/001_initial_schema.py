"""Initial schema — habits, habit_week_days, days, day_habits.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "habits",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("created_at", sa.DateTime, nullable=False),
    )

    op.create_table(
        "habit_week_days",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("habit_id", UUID(as_uuid=True), sa.ForeignKey("habits.id"), nullable=False),
        sa.Column("week_day", sa.Integer, nullable=False),
        sa.UniqueConstraint("habit_id", "week_day", name="uq_habit_week_day"),
        sa.CheckConstraint("week_day BETWEEN 0 AND 6", name="ck_week_day_range"),
    )

    op.create_table(
        "days",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("date", sa.DateTime, nullable=False, unique=True),
    )

    op.create_table(
        "day_habits",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("day_id", UUID(as_uuid=True), sa.ForeignKey("days.id"), nullable=False),
        sa.Column("habit_id", UUID(as_uuid=True), sa.ForeignKey("habits.id"), nullable=False),
        sa.UniqueConstraint("day_id", "habit_id", name="uq_day_habit"),
    )


def downgrade() -> None:
    op.drop_table("day_habits")
    op.drop_table("days")
    op.drop_table("habit_week_days")
    op.drop_table("habits")
