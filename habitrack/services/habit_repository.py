"""Habit Repository — SQLAlchemy implementation of core.repository_protocols.HabitRepository.

Invariants:
    - One repository per request, bound to that request's AsyncSession
    - Writes commit before returning; reads never commit
    - Dates received here are already start-of-day normalized by the caller

Design Decisions:
    - Find-or-create for Day relies on the UNIQUE(days.date) constraint: a racing
      duplicate insert fails the commit instead of creating a second row
    - summarize_days is a single Core statement with two labelled correlated
      scalar subqueries, so completed/amount are always distinct columns
"""

import logging
from datetime import datetime

from sqlalchemy import Float, cast, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from habitrack.core.domain_types import HabitId, WeekDay
from habitrack.core.errors import DatabaseError, ErrorContext
from habitrack.infrastructure.sql_functions import week_day
from habitrack.models.day import Day, DayHabit
from habitrack.models.habit import Habit, HabitWeekDay

logger = logging.getLogger(__name__)


class SqlHabitRepository:
    """Habit/day persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_habit(
        self, title: str, week_days: list[WeekDay], created_at: datetime,
    ) -> Habit:
        """Insert habit and its recurrence rows in one commit."""
        habit = Habit(
            title=title,
            created_at=created_at,
            week_days=[HabitWeekDay(week_day=int(d)) for d in week_days],
        )
        self.db.add(habit)
        await self.db.commit()
        return habit

    async def find_possible_habits(
        self, moment: datetime, week_day: WeekDay,
    ) -> list[Habit]:
        """Habits created at or before moment whose recurrence set has week_day."""
        result = await self.db.execute(
            select(Habit)
            .where(Habit.created_at <= moment)
            .where(Habit.week_days.any(HabitWeekDay.week_day == int(week_day)))
            .order_by(Habit.created_at, Habit.title)
        )
        return list(result.scalars().all())

    async def find_completed_habit_ids(self, day: datetime) -> list[HabitId] | None:
        """Habit ids completed on day, or None when no Day row exists."""
        result = await self.db.execute(select(Day).where(Day.date == day))
        db_day = result.scalar_one_or_none()
        if not db_day:
            return None
        return [HabitId(dh.habit_id) for dh in db_day.day_habits]

    async def toggle_completion(self, habit_id: HabitId, day: datetime) -> bool:
        """Flip completion of habit on day. Returns the new completed state.

        Unknown habits (FK) and a lost Day insert race (UNIQUE) surface as
        DatabaseError carrying the habit and day.
        """
        try:
            return await self._toggle(habit_id, day)
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(f"DB integrity error on toggle: {e}")
            raise DatabaseError(
                "Integrity constraint violated", "commit",
                ErrorContext(habit_id=habit_id, day=day),
            )

    async def _toggle(self, habit_id: HabitId, day: datetime) -> bool:
        # Find or create day
        result = await self.db.execute(select(Day).where(Day.date == day))
        db_day = result.scalar_one_or_none()
        if not db_day:
            db_day = Day(date=day)
            self.db.add(db_day)
            await self.db.flush()

        result = await self.db.execute(
            select(DayHabit)
            .where(DayHabit.day_id == db_day.id)
            .where(DayHabit.habit_id == habit_id)
        )
        day_habit = result.scalar_one_or_none()
        if day_habit:
            await self.db.delete(day_habit)
            completed = False
        else:
            self.db.add(DayHabit(day_id=db_day.id, habit_id=habit_id))
            completed = True
        await self.db.commit()
        return completed

    async def summarize_days(self) -> list[dict]:
        """Per existing Day: completed count and possible-habit count."""
        completed = (
            select(cast(func.count(), Float))
            .select_from(DayHabit)
            .where(DayHabit.day_id == Day.id)
            .correlate(Day)
            .scalar_subquery()
        )
        amount = (
            select(cast(func.count(), Float))
            .select_from(HabitWeekDay)
            .join(Habit, Habit.id == HabitWeekDay.habit_id)
            .where(HabitWeekDay.week_day == week_day(Day.date))
            .where(Habit.created_at <= Day.date)
            .correlate(Day)
            .scalar_subquery()
        )
        result = await self.db.execute(
            select(
                Day.id,
                Day.date,
                completed.label("completed"),
                amount.label("amount"),
            ).order_by(Day.date)
        )
        return [dict(row) for row in result.mappings().all()]
