"""Route Dependencies — per-request repository and clock injection.

Invariants:
    - Handlers never construct sessions or repositories themselves
    - get_now is the only source of "today" for request handling

Design Decisions:
    - Clock as a dependency: tests override it via app.dependency_overrides
      instead of patching datetime
"""

from datetime import datetime

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from habitrack.core.repository_protocols import HabitRepository
from habitrack.infrastructure.database import get_db
from habitrack.services.habit_repository import SqlHabitRepository


def get_now() -> datetime:
    """Current server-local time."""
    return datetime.now()


async def get_habit_repository(
    db: AsyncSession = Depends(get_db),
) -> HabitRepository:
    return SqlHabitRepository(db)
