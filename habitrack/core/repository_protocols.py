"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Handlers reach persistence only through HabitRepository, injected per request

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Dates crossing this boundary are already normalized by core/calendar.py;
      implementations never derive "today" themselves
"""

from datetime import datetime
from typing import Protocol

from habitrack.core.domain_types import HabitId, WeekDay


class HabitLike(Protocol):
    """Structural contract for Habit objects returned by the repository."""
    id: HabitId
    title: str
    created_at: datetime


class HabitRepository(Protocol):
    """Contract for habit/day persistence — implemented by shell."""
    async def create_habit(
        self, title: str, week_days: list[WeekDay], created_at: datetime,
    ) -> HabitLike: ...
    async def find_possible_habits(
        self, moment: datetime, week_day: WeekDay,
    ) -> list[HabitLike]: ...
    async def find_completed_habit_ids(
        self, day: datetime,
    ) -> list[HabitId] | None: ...
    async def toggle_completion(self, habit_id: HabitId, day: datetime) -> bool: ...
    async def summarize_days(self) -> list[dict]: ...
