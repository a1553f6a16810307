"""
Tool: Schedule Analytics
Purpose: Density, busy time and per-day grouping for a set of occurrences

Overlapping occurrences are not merged: two meetings booked over the same
hour count as two hours of commitments.
"""

import math
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta

from slotwise.models import DayBreakdown, Occurrence, ScheduleAnalysis


ONE_DAY = timedelta(days=1)


def meeting_density(
    occurrences: Sequence[Occurrence],
    period_start: datetime,
    period_end: datetime,
) -> float:
    """
    Average occurrences per day, counting partial days as whole days.

    A zero-length period raises ZeroDivisionError; callers must not pass one.
    """
    days = math.ceil((period_end - period_start) / ONE_DAY)
    return len(occurrences) / days


def total_busy_duration(occurrences: Iterable[Occurrence]) -> timedelta:
    """Sum of occurrence durations, double-booked time included twice."""
    return sum((occ.end - occ.start for occ in occurrences), timedelta())


def group_by_day(occurrences: Iterable[Occurrence]) -> dict[date, list[Occurrence]]:
    """
    Group occurrences by the calendar date of their start.

    Dates are read in each occurrence's own time zone. An occurrence that
    crosses midnight is filed under its start day only. Days appear in
    first-seen order.
    """
    grouped: dict[date, list[Occurrence]] = {}
    for occ in occurrences:
        grouped.setdefault(occ.start.date(), []).append(occ)
    return grouped


def analyze_schedule(
    occurrences: Sequence[Occurrence],
    period_start: datetime,
    period_end: datetime,
) -> ScheduleAnalysis:
    """
    Bundle density, total busy time and a per-day breakdown.

    Args:
        occurrences: Occurrences inside the period
        period_start: Start of the analyzed period
        period_end: End of the analyzed period (must be after period_start)

    Returns:
        ScheduleAnalysis with one DayBreakdown per day that has events
    """
    days = [
        DayBreakdown(day=day, event_count=len(day_events), total_duration=total_busy_duration(day_events))
        for day, day_events in group_by_day(occurrences).items()
    ]

    return ScheduleAnalysis(
        total_events=len(occurrences),
        total_duration=total_busy_duration(occurrences),
        density=meeting_density(occurrences, period_start, period_end),
        days=days,
    )


__all__ = ["analyze_schedule", "group_by_day", "meeting_density", "total_busy_duration"]
