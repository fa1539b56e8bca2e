"""Habit Tracker — orchestrates the four habit operations around the repository.

Invariants:
    - "now" is always passed in by the caller (route dependency), never read here
    - Every date is normalized through core/calendar.py before reaching the repository
    - Toggle targets start_of_day(now), never a client-supplied date

Design Decisions:
    - Plain async functions taking the repository: routes stay thin and tests can
      pass any HabitRepository implementation
    - /day compares creation against the raw (local) input moment and looks the
      Day row up by the normalized date; created_at is always start-of-day, so
      the raw comparison includes habits created on the queried day
"""

import logging
from datetime import datetime

from habitrack.core.calendar import start_of_day, to_local_naive, week_day_of
from habitrack.core.domain_types import HabitId
from habitrack.core.repository_protocols import HabitRepository
from habitrack.schemas.day import DayView, DaySummary
from habitrack.schemas.habit import (
    HabitCreate, HabitCreated, HabitResponse, ToggleResult,
)

logger = logging.getLogger(__name__)


async def create_habit(
    repo: HabitRepository, body: HabitCreate, now: datetime,
) -> HabitCreated:
    """Create a habit starting today with the given recurrence set."""
    today = start_of_day(now)
    recurrence = body.recurrence()
    habit = await repo.create_habit(body.title, recurrence, today)
    logger.info(
        f"Habit created: {habit.title!r}",
        extra={"habit_id": habit.id, "day": today},
    )
    return HabitCreated(
        id=habit.id,
        title=habit.title,
        created_at=habit.created_at,
        week_days=[int(d) for d in recurrence],
    )


async def get_day_view(repo: HabitRepository, date: datetime) -> DayView:
    """Possible and completed habits for the calendar day of date."""
    moment = to_local_naive(date)
    day = start_of_day(moment)
    possible = await repo.find_possible_habits(moment, week_day_of(day))
    completed = await repo.find_completed_habit_ids(day)
    return DayView(
        possible_habits=[HabitResponse.model_validate(h) for h in possible],
        completed_habits=completed,
    )


async def toggle_habit(
    repo: HabitRepository, habit_id: HabitId, now: datetime,
) -> ToggleResult:
    """Flip today's completion state of a habit."""
    today = start_of_day(now)
    completed = await repo.toggle_completion(habit_id, today)
    logger.info(
        f"Habit {'completed' if completed else 'uncompleted'}",
        extra={"habit_id": habit_id, "day": today},
    )
    return ToggleResult(habit_id=habit_id, date=today, completed=completed)


async def get_summary(repo: HabitRepository) -> list[DaySummary]:
    """Completed vs possible counts for every day that has a Day row."""
    rows = await repo.summarize_days()
    return [DaySummary.model_validate(row) for row in rows]
