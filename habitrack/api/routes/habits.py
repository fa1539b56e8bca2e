"""Habit Routes — create habits and toggle today's completion.

Invariants:
    - Body and path params validated by Pydantic before the handler runs
    - Toggle always targets today (server clock), never a client date
"""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, status

from habitrack.api.dependencies import get_habit_repository, get_now
from habitrack.core.domain_types import HabitId
from habitrack.core.repository_protocols import HabitRepository
from habitrack.schemas.habit import HabitCreate, HabitCreated, ToggleResult
from habitrack.services import habit_tracker

router = APIRouter(prefix="/habits", tags=["habits"])


@router.post(
    "", response_model=HabitCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_habit(
    body: HabitCreate,
    repo: HabitRepository = Depends(get_habit_repository),
    now: datetime = Depends(get_now),
):
    """Create a habit active from today on the given weekdays."""
    return await habit_tracker.create_habit(repo, body, now)


@router.patch("/{habit_id}/toggle", response_model=ToggleResult)
async def toggle_habit(
    habit_id: UUID,
    repo: HabitRepository = Depends(get_habit_repository),
    now: datetime = Depends(get_now),
):
    """Mark habit done today, or undo it if already done."""
    return await habit_tracker.toggle_habit(repo, HabitId(habit_id), now)
