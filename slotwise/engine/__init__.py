"""Scheduling Engine: pure functions over concrete occurrences

Data flows one way: event definitions -> recurrence.py -> occurrences ->
{conflicts.py, free_slots.py, analytics.py} -> optimal.py.

Components:
    conflicts.py: Half-open overlap test and conflict lookup
    recurrence.py: Expand recurring definitions inside a query window
    free_slots.py: Fixed-step search for free slots of a given duration
    optimal.py: Rank free slots against preferred hours
    analytics.py: Density, busy time and per-day grouping

None of these functions read configuration, hold state or perform I/O.
Callers pass defaults explicitly and enforce input preconditions.
"""

from slotwise.engine.analytics import (
    analyze_schedule,
    group_by_day,
    meeting_density,
    total_busy_duration,
)
from slotwise.engine.conflicts import conflicts_with, is_free, overlaps
from slotwise.engine.free_slots import BUSINESS_HOURS, SLOT_STEP, find_free_slots
from slotwise.engine.optimal import find_optimal_slot, rank_slots
from slotwise.engine.recurrence import expand_definition, expand_definitions


__all__ = [
    "BUSINESS_HOURS",
    "SLOT_STEP",
    "analyze_schedule",
    "conflicts_with",
    "expand_definition",
    "expand_definitions",
    "find_free_slots",
    "find_optimal_slot",
    "group_by_day",
    "is_free",
    "meeting_density",
    "overlaps",
    "rank_slots",
    "total_busy_duration",
]
