"""
Domain: Sales statistics for the dashboard.

Pure reducers over a list of SaleRecord snapshots. No I/O, no clock: the
reference instant and reporting timezone are passed in explicitly.

Rules:
- total_count counts every record supplied.
- today_count / today_revenue cover records inside the day containing `now`.
- month_revenue covers records inside the month containing `now`.
- average_ticket = month_revenue / total_count, or 0 when there are no records.
- Boundaries are inclusive (see domain.time).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from decimal import Decimal
from typing import Dict, Iterable, Mapping, Sequence

from .sale import SaleRecord
from .sale_status import SaleStatus
from .time import day_bounds, month_bounds

_ZERO = Decimal("0")


@dataclass(frozen=True, slots=True)
class PeriodStats:
    total_count: int
    today_count: int
    today_revenue: Decimal
    month_revenue: Decimal
    average_ticket: Decimal

    @staticmethod
    def empty() -> "PeriodStats":
        return PeriodStats(
            total_count=0,
            today_count=0,
            today_revenue=_ZERO,
            month_revenue=_ZERO,
            average_ticket=_ZERO,
        )


def compute_stats(
    records: Sequence[SaleRecord],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> PeriodStats:
    """
    Compute today's and this month's figures from `records`.

    `now` must be a UTC timestamp; "today" and "this month" are resolved in `tz`.
    """

    today = day_bounds(now, tz)
    month = month_bounds(now, tz)

    today_count = 0
    today_revenue = _ZERO
    month_revenue = _ZERO

    for record in records:
        amount = record.total_amount
        if today.contains(record.sold_at):
            today_count += 1
            today_revenue += amount
        if month.contains(record.sold_at):
            month_revenue += amount

    total_count = len(records)
    if total_count > 0:
        average_ticket = month_revenue / total_count
    else:
        average_ticket = _ZERO

    return PeriodStats(
        total_count=total_count,
        today_count=today_count,
        today_revenue=today_revenue,
        month_revenue=month_revenue,
        average_ticket=average_ticket,
    )


def compute_status_counts(records: Iterable[SaleRecord]) -> Dict[str, int]:
    """Count records per observed status literal. Statuses never seen are omitted."""

    counts: Dict[str, int] = {}
    for record in records:
        counts[record.status] = counts.get(record.status, 0) + 1
    return counts


def fill_known_statuses(counts: Mapping[str, int]) -> Dict[str, int]:
    """Return a copy of `counts` with a zero bucket for every known status that is absent."""

    filled = {status.value: 0 for status in SaleStatus}
    filled.update(counts)
    return filled
