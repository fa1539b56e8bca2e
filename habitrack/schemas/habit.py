"""Habit Schemas — habit creation input and habit/toggle responses.

Invariants:
    - HabitCreate.title: 1-200 chars after stripping whitespace
    - HabitCreate.week_days: strict integers 0..6, duplicates collapsed, sorted
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from habitrack.core.domain_types import WeekDay

WeekDayValue = Annotated[int, Field(ge=0, le=6, strict=True)]


class HabitCreate(BaseModel):
    """Habit creation — title plus recurrence weekdays (0 = Sunday)."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(max_length=200)
    week_days: list[WeekDayValue] = Field(alias="weekDays")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    @field_validator("week_days")
    @classmethod
    def dedupe_week_days(cls, v: list[int]) -> list[int]:
        return sorted(set(v))

    def recurrence(self) -> list[WeekDay]:
        return [WeekDay(d) for d in self.week_days]


class HabitResponse(BaseModel):
    """Habit as listed in a day view."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    created_at: datetime


class HabitCreated(HabitResponse):
    """Habit creation response — includes the stored recurrence set."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    week_days: list[int] = Field(alias="weekDays")


class ToggleResult(BaseModel):
    """Completion state of a habit for today after a toggle."""
    model_config = ConfigDict(populate_by_name=True)

    habit_id: UUID = Field(alias="habitId")
    date: datetime
    completed: bool
