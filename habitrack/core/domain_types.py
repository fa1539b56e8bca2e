"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - HabitId wraps UUIDs — never use bare UUID in domain logic
    - WeekDay values follow the Sunday = 0 convention used by the database
      week_day() function and by core/calendar.py

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - IntEnum for WeekDay: serializes as a plain JSON integer
"""

from enum import IntEnum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

HabitId = NewType("HabitId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class WeekDay(IntEnum):
    """Recurrence weekdays, Sunday first."""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
