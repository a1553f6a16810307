"""
Tool: Conflict Detector
Purpose: Interval overlap and conflict lookup for proposed time slots

Slots are half-open, so touching intervals (a.end == b.start) never
overlap and zero-length slots overlap nothing, themselves included.

Every call scans the full occurrence list; there is no index.
"""

from collections.abc import Iterable

from slotwise.models import Occurrence, TimeSlot


def overlaps(a: TimeSlot, b: TimeSlot) -> bool:
    """True iff the two half-open intervals share any instant."""
    return a.overlaps(b)


def conflicts_with(slot: TimeSlot, occurrences: Iterable[Occurrence]) -> list[Occurrence]:
    """
    Find every occurrence that overlaps a slot.

    Args:
        slot: Proposed time slot
        occurrences: Concrete occurrences to check against

    Returns:
        Conflicting occurrences, in input order
    """
    return [occ for occ in occurrences if overlaps(slot, occ.slot)]


def is_free(slot: TimeSlot, occurrences: Iterable[Occurrence]) -> bool:
    """True iff no occurrence overlaps the slot."""
    return not conflicts_with(slot, occurrences)


__all__ = ["conflicts_with", "is_free", "overlaps"]
