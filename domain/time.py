"""
Domain time utilities (pure).

Centralized timestamp validation and reporting-period boundaries.

Behavior and error messages must remain consistent across the domain model.

Period boundaries are inclusive on both ends:
- A day runs from local 00:00:00 through the last microsecond before the next
  local midnight.
- A month runs from local midnight on its first day through the last
  microsecond before the first day of the following month.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

# Smallest step a datetime can represent; end-of-period = next start - _TICK.
_TICK = timedelta(microseconds=1)


def require_utc_timestamp(name: str, value: datetime) -> None:
    """
    Enforces the requirement that timestamps are UTC.

    Invariants:
    - Timestamps must be timezone-aware.
    - Timestamps must have UTC offset 0.
    """

    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware (UTC)")
    if value.utcoffset() != timedelta(0):
        raise ValueError(f"{name} must be a UTC timestamp (offset 0)")


@dataclass(frozen=True, slots=True)
class PeriodBounds:
    """Inclusive [start, end] instants of a reporting period, in the reporting timezone."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


def _local_midnight(year: int, month: int, day: int, tz: tzinfo) -> datetime:
    return datetime(year, month, day, tzinfo=tz)


def day_bounds(now: datetime, tz: tzinfo = timezone.utc) -> PeriodBounds:
    """Bounds of the calendar day containing `now` in `tz`."""

    require_utc_timestamp("now", now)
    local = now.astimezone(tz)
    start = _local_midnight(local.year, local.month, local.day, tz)
    following = local.date() + timedelta(days=1)
    next_start = _local_midnight(following.year, following.month, following.day, tz)
    return PeriodBounds(start=start, end=next_start - _TICK)


def month_bounds(now: datetime, tz: tzinfo = timezone.utc) -> PeriodBounds:
    """Bounds of the calendar month containing `now` in `tz`."""

    require_utc_timestamp("now", now)
    local = now.astimezone(tz)
    start = _local_midnight(local.year, local.month, 1, tz)
    if local.month == 12:
        next_start = _local_midnight(local.year + 1, 1, 1, tz)
    else:
        next_start = _local_midnight(local.year, local.month + 1, 1, tz)
    return PeriodBounds(start=start, end=next_start - _TICK)
