"""Day Routes — per-day view and the cross-day summary.

Invariants:
    - GET /day omits completedHabits when the date has no Day row
    - GET /summary lists only dates that have a Day row
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from habitrack.api.dependencies import get_habit_repository
from habitrack.core.repository_protocols import HabitRepository
from habitrack.schemas.day import DayView, DaySummary
from habitrack.services import habit_tracker

router = APIRouter(tags=["days"])


@router.get(
    "/day", response_model=DayView, response_model_exclude_none=True,
)
async def get_day(
    date: datetime = Query(..., description="ISO date or datetime"),
    repo: HabitRepository = Depends(get_habit_repository),
):
    """Habits possible on date and the ids already completed."""
    return await habit_tracker.get_day_view(repo, date)


@router.get("/summary", response_model=list[DaySummary])
async def get_summary(repo: HabitRepository = Depends(get_habit_repository)):
    """Completed and possible habit counts for every tracked day."""
    return await habit_tracker.get_summary(repo)
