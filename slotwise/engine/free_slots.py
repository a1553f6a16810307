"""
Tool: Free-Slot Search
Purpose: Enumerate free slots of a fixed duration across a search window

The search walks candidate starts from window_start in fixed steps while
the candidate still ends by window_end. With business_hours_only set, only
the candidate's start hour is gated, so a 16:30 start that runs past 17:00
is still a candidate.

Accepted slots are returned in chronological order and are not merged;
overlapping or adjacent accepted slots each appear.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta

from slotwise.engine.conflicts import is_free
from slotwise.models import Occurrence, TimeSlot


SLOT_STEP = timedelta(minutes=30)
BUSINESS_HOURS = (9, 17)  # [start, end) local hour of day


def find_free_slots(
    window_start: datetime,
    window_end: datetime,
    duration: timedelta,
    occurrences: Sequence[Occurrence],
    business_hours_only: bool = False,
    *,
    business_hours: tuple[int, int] = BUSINESS_HOURS,
    step: timedelta = SLOT_STEP,
) -> list[TimeSlot]:
    """
    Find every free slot of the requested duration in a window.

    Callers must ensure window_end > window_start, duration > 0 and
    step > 0; none of these are checked here.

    Args:
        window_start: First candidate start
        window_end: Latest allowed slot end
        duration: Length of each slot
        occurrences: Busy occurrences to avoid
        business_hours_only: Skip candidates starting outside business_hours
        business_hours: (first hour, end hour) gate for candidate starts
        step: Distance between consecutive candidate starts

    Returns:
        Free slots, earliest first (empty if nothing fits)
    """
    open_hour, close_hour = business_hours
    free_slots: list[TimeSlot] = []

    current = window_start
    while current + duration <= window_end:
        if business_hours_only and not (open_hour <= current.hour < close_hour):
            current += step
            continue

        slot = TimeSlot(current, current + duration)
        if is_free(slot, occurrences):
            free_slots.append(slot)

        current += step

    return free_slots


__all__ = ["BUSINESS_HOURS", "SLOT_STEP", "find_free_slots"]
