"""Day Schemas — day view and per-day summary responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from habitrack.schemas.habit import HabitResponse


class DayView(BaseModel):
    """Habits possible on a date and the ids completed on it.

    completed_habits is None when no Day row exists for the date; the route
    omits it from the JSON body in that case.
    """
    model_config = ConfigDict(populate_by_name=True)

    possible_habits: list[HabitResponse] = Field(alias="possibleHabits")
    completed_habits: list[UUID] | None = Field(
        None, alias="completedHabits",
    )


class DaySummary(BaseModel):
    """One summary row per existing Day."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    date: datetime
    completed: float
    amount: float
