"""Calendar — pure day-boundary and weekday helpers shared by every operation.

Invariants:
    - All returned datetimes are naive, in server-local wall-clock time
    - start_of_day() is idempotent
    - week_day_of() uses Sunday = 0, matching the SQL week_day() function

Design Decisions:
    - Aware inputs are converted to server local time before tzinfo is dropped,
      so "today" and stored dates share one frame of reference
"""

from datetime import datetime

from habitrack.core.domain_types import WeekDay


def to_local_naive(moment: datetime) -> datetime:
    """Express moment as a naive server-local datetime."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def start_of_day(moment: datetime) -> datetime:
    """Midnight of moment's local calendar day."""
    return to_local_naive(moment).replace(
        hour=0, minute=0, second=0, microsecond=0,
    )


def week_day_of(moment: datetime) -> WeekDay:
    """Weekday index of moment's local calendar day (Sunday = 0)."""
    # date.weekday() is Monday = 0
    return WeekDay((to_local_naive(moment).weekday() + 1) % 7)
