"""Day ORM — calendar days with at least one toggle, and their completion marks.

Invariants:
    - Day.date is a start-of-day value and UNIQUE: find-or-create in toggle
      relies on it to reject a second row for the same date
    - (day_id, habit_id) unique: a DayHabit row means "completed", absence means not
    - Day rows are never deleted; DayHabit rows only created/deleted by toggle
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from habitrack.db.base import Base


class Day(Base):
    """Day entity — lazily created on the first toggle of a date."""
    __tablename__ = "days"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False, unique=True)

    day_habits: Mapped[list["DayHabit"]] = relationship(
        "DayHabit", back_populates="day",
        cascade="all, delete-orphan", lazy="selectin",
    )


class DayHabit(Base):
    """Completion mark — habit done on day."""
    __tablename__ = "day_habits"
    __table_args__ = (
        UniqueConstraint("day_id", "habit_id", name="uq_day_habit"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    day_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("days.id"), nullable=False,
    )
    habit_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("habits.id"), nullable=False,
    )

    day: Mapped["Day"] = relationship("Day", back_populates="day_habits")
