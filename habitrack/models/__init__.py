"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per aggregate: habit.py (Habit + recurrence), day.py (Day + completions)
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from habitrack.models.habit import Habit, HabitWeekDay  # noqa: F401
from habitrack.models.day import Day, DayHabit  # noqa: F401
