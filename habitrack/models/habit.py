"""Habit ORM — a recurring task and its weekly recurrence set.

Invariants:
    - id is UUID primary key (client-side default)
    - created_at is always a start-of-day value (set by services, never "now")
    - (habit_id, week_day) unique: the recurrence set holds each weekday once
    - week_day in 0..6, Sunday = 0

Design Decisions:
    - HabitWeekDay rows created together with the Habit through the relationship
      (single flush/commit); never updated afterwards
    - cascade delete for week_days: a habit owns its recurrence rows
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    String, Integer, DateTime, ForeignKey, UniqueConstraint, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from habitrack.db.base import Base


class Habit(Base):
    """Habit entity — title plus weekday recurrence set."""
    __tablename__ = "habits"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    week_days: Mapped[list["HabitWeekDay"]] = relationship(
        "HabitWeekDay", back_populates="habit",
        cascade="all, delete-orphan", lazy="selectin",
    )


class HabitWeekDay(Base):
    """Join entity — one weekday of a habit's recurrence set."""
    __tablename__ = "habit_week_days"
    __table_args__ = (
        UniqueConstraint("habit_id", "week_day", name="uq_habit_week_day"),
        CheckConstraint("week_day BETWEEN 0 AND 6", name="ck_week_day_range"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    habit_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("habits.id"), nullable=False,
    )
    week_day: Mapped[int] = mapped_column(Integer, nullable=False)

    habit: Mapped["Habit"] = relationship("Habit", back_populates="week_days")
